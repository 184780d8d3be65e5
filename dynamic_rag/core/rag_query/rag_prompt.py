"""
Retrieval-augmented query prompt.

Defines the chat prompt template used to answer a question from retrieved
context, and converts rendered messages to OpenAI-style role/content dicts.

Dependencies: langchain_core.prompts
System role: Prompt template for retrieval-augmented queries
"""

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = "You are a helpful assistant. Use the provided context to answer questions."

RAG_QUERY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", "Context: {context}\n\nQuestion: {question}"),
])

_ROLE_BY_TYPE = {
    "system": "system",
    "human": "user",
    "ai": "assistant",
}


def to_chat_messages(messages: list[BaseMessage]) -> list[dict[str, str]]:
    """
    Convert LangChain messages to chat-completion wire messages.

    Args:
        messages: Rendered prompt messages

    Returns:
        list[dict[str, str]]: Messages as {"role", "content"} dicts
    """
    return [
        {"role": _ROLE_BY_TYPE.get(message.type, message.type), "content": str(message.content)}
        for message in messages
    ]


def build_query_messages(question: str, context: str) -> list[dict[str, str]]:
    """
    Render the query prompt for one question.

    Args:
        question: User question
        context: Retrieved context text

    Returns:
        list[dict[str, str]]: System and user messages
    """
    rendered = RAG_QUERY_PROMPT.format_messages(context=context, question=question)
    return to_chat_messages(rendered)
