"""Exceptions raised while reading tool response envelopes."""
from typing import Optional


class EnvelopeError(Exception):
    """Base class for all envelope related errors."""


class EnvelopeTagError(EnvelopeError, ValueError):
    """A named tag could not be located or closed in the envelope text."""

    def __init__(self, tag: str, message: Optional[str] = None):
        self.tag = tag
        super().__init__(message or f"Invalid {tag} in tool response")


class MissingTagError(EnvelopeTagError):
    """The opening tag never occurs in the text."""

    def __init__(self, tag: str):
        super().__init__(tag, f"Missing {tag} in tool response")


class MalformedTagError(EnvelopeTagError):
    """An opening tag has no matching closing tag."""


class ToolResponseParseError(EnvelopeError):
    """Raised when a tool response envelope cannot be parsed as a whole."""
