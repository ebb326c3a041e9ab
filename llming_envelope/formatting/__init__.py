"""Rendering of tool responses into envelope text and content blocks."""

from .format_tools import (
    ContentBlock,
    TRUNCATION_NOTICE,
    format_tool_response,
    is_text_block,
    is_tool_response_v2,
    tool_feedback_to_msg,
    tool_response_to_ai_state,
    truncate_tool_from_msg,
)

__all__ = [
    'ContentBlock',
    'TRUNCATION_NOTICE',
    'format_tool_response',
    'is_text_block',
    'is_tool_response_v2',
    'tool_feedback_to_msg',
    'tool_response_to_ai_state',
    'truncate_tool_from_msg',
]
