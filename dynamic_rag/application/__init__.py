"""
Application layer.

Orchestrates core logic and boundary clients into user-facing operations.
"""
