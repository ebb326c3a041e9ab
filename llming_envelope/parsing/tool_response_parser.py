"""Parsing of ``<toolResponse>`` envelopes back into structured fields."""
import logging
from typing import Optional

from llming_envelope.config import DEFAULT_CONFIG, EnvelopeConfig
from llming_envelope.errors import EnvelopeTagError, ToolResponseParseError
from llming_envelope.parsing.tag_extractor import extract_tag
from llming_envelope.tool_response import ParsedToolResponse

logger = logging.getLogger(__name__)

TOOL_RESPONSE_TAG = "toolResponse"
TOOL_NAME_TAG = "toolName"
TOOL_STATUS_TAG = "toolStatus"
TOOL_RESULT_TAG = "toolResult"


def parse_tool_response(text: str, config: Optional[EnvelopeConfig] = None) -> ParsedToolResponse:
    """Parse a tool response envelope into its fields.

    Each field is looked up independently in the full text. Parsing is all or
    nothing: if any field is missing or unclosed no partial result is returned.

    :param text: Text containing a ``<toolResponse>`` envelope
    :param config: Envelope configuration, defaults to DEFAULT_CONFIG
    :return: The parsed tool response
    :raises ToolResponseParseError: If any of the fields cannot be extracted
    """
    config = config or DEFAULT_CONFIG
    try:
        response_body = extract_tag(text, TOOL_RESPONSE_TAG)
        tool_name = extract_tag(text, TOOL_NAME_TAG)
        tool_status = extract_tag(text, TOOL_STATUS_TAG)
        tool_result = extract_tag(text, TOOL_RESULT_TAG)
    except EnvelopeTagError as e:
        raise ToolResponseParseError(f"Failed to parse tool response: {e}") from e

    return ParsedToolResponse(
        tool_name=tool_name,
        tool_status=tool_status,
        tool_result=tool_result,
        has_images=config.image_marker in response_body,
    )


def try_parse_tool_response(text: str, config: Optional[EnvelopeConfig] = None) -> Optional[ParsedToolResponse]:
    """Like parse_tool_response, but returns None for unparseable text."""
    try:
        return parse_tool_response(text, config)
    except ToolResponseParseError as e:
        logger.debug("Ignoring unparseable tool response: %s", e)
        return None
