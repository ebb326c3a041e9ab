"""llming-envelope: tool response envelopes for LLM conversations."""

from llming_envelope.config import EnvelopeConfig, DEFAULT_CONFIG
from llming_envelope.errors import (
    EnvelopeError,
    EnvelopeTagError,
    MissingTagError,
    MalformedTagError,
    ToolResponseParseError,
)
from llming_envelope.tool_response import ToolResponseStatus, ToolResponseV2, ParsedToolResponse
from llming_envelope.parsing import extract_tag, parse_tool_response, try_parse_tool_response
from llming_envelope.utils.image_utils import ImageFormat, sniff_image_type, detect_image_media_type
from llming_envelope.formatting import (
    format_tool_response,
    tool_response_to_ai_state,
    truncate_tool_from_msg,
    is_text_block,
    is_tool_response_v2,
)

__all__ = [
    "EnvelopeConfig",
    "DEFAULT_CONFIG",
    "EnvelopeError",
    "EnvelopeTagError",
    "MissingTagError",
    "MalformedTagError",
    "ToolResponseParseError",
    "ToolResponseStatus",
    "ToolResponseV2",
    "ParsedToolResponse",
    "extract_tag",
    "parse_tool_response",
    "try_parse_tool_response",
    "ImageFormat",
    "sniff_image_type",
    "detect_image_media_type",
    "format_tool_response",
    "tool_response_to_ai_state",
    "truncate_tool_from_msg",
    "is_text_block",
    "is_tool_response_v2",
]
