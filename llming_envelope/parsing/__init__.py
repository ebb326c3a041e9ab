"""Recovery of structured fields from tool response envelopes."""

from .tag_extractor import extract_tag
from .tool_response_parser import (
    parse_tool_response,
    try_parse_tool_response,
    TOOL_RESPONSE_TAG,
    TOOL_NAME_TAG,
    TOOL_STATUS_TAG,
    TOOL_RESULT_TAG,
)

__all__ = [
    'extract_tag',
    'parse_tool_response',
    'try_parse_tool_response',
    'TOOL_RESPONSE_TAG',
    'TOOL_NAME_TAG',
    'TOOL_STATUS_TAG',
    'TOOL_RESULT_TAG',
]
