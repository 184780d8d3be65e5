"""
Code-line classifier.

Heuristic predicate set that decides whether a line (or a buffered run of
lines) looks like source code. Not a parser: false positives and negatives
are accepted.

Signals are anchored to the start and end of the examined text, so a
multi-line buffer is judged by its first line's prefix, its final suffix and
any arrow token anywhere inside it.

Dependencies: re
System role: First stage of document chunking
"""

import re
from dataclasses import dataclass
from typing import Iterable, Protocol


class CodeSignal(Protocol):
    """Single "looks like code" rule."""

    name: str

    def matches(self, text: str) -> bool:
        ...


@dataclass(frozen=True)
class RegexSignal:
    """Code signal backed by a regular expression searched in the text."""

    name: str
    pattern: re.Pattern

    @classmethod
    def compile(cls, name: str, expression: str) -> "RegexSignal":
        return cls(name=name, pattern=re.compile(expression))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


DEFAULT_SIGNALS: tuple[RegexSignal, ...] = (
    RegexSignal.compile("import", r"^import\s+"),
    RegexSignal.compile("const_declaration", r"^const\s+"),
    RegexSignal.compile("let_declaration", r"^let\s+"),
    RegexSignal.compile("function_declaration", r"^function\s+"),
    RegexSignal.compile("class_declaration", r"^class\s+"),
    RegexSignal.compile("arrow", r"=>"),
    RegexSignal.compile("trailing_open_brace", r"\{\s*\Z"),
    RegexSignal.compile("leading_close_brace", r"^\s*\}"),
    RegexSignal.compile("return", r"^\s*return\s+"),
    RegexSignal.compile("if", r"^\s*if\s*\("),
    RegexSignal.compile("for", r"^\s*for\s*\("),
    RegexSignal.compile("while", r"^\s*while\s*\("),
)


class LineClassifier:
    """Classify text as code when any configured signal matches."""

    def __init__(self, signals: Iterable[CodeSignal] | None = None) -> None:
        """
        Initialize classifier with a signal set.

        Args:
            signals: Code signals to evaluate (DEFAULT_SIGNALS if None)

        Raises:
            ValueError: When an empty signal set is given
        """
        self._signals: tuple[CodeSignal, ...] = tuple(
            DEFAULT_SIGNALS if signals is None else signals
        )
        if not self._signals:
            raise ValueError("LineClassifier needs at least one signal")

    @property
    def signals(self) -> tuple[CodeSignal, ...]:
        return self._signals

    def with_signals(self, *signals: CodeSignal) -> "LineClassifier":
        """Return a new classifier with extra signals appended."""
        return LineClassifier(self._signals + signals)

    def is_code(self, text: str) -> bool:
        """
        Check whether text carries any strong code signal.

        Args:
            text: Single line or newline-joined buffer

        Returns:
            bool: True if any signal matches
        """
        return any(signal.matches(text) for signal in self._signals)

    def __call__(self, text: str) -> bool:
        return self.is_code(text)


_default_classifier = LineClassifier()


def is_code_line(text: str) -> bool:
    """Classify text with the default signal set."""
    return _default_classifier.is_code(text)
