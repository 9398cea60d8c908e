"""Agent modules for the relay bot."""

from .completion_agent import CompletionAgent, split_messages

__all__ = [
    "CompletionAgent",
    "split_messages",
]
