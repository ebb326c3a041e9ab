"""Rendering of tool responses into Anthropic message content blocks.

A tool response becomes a text block holding a ``<toolResponse>`` envelope,
followed by the tool's images as base64 image blocks. The envelope can later be
read back with :func:`llming_envelope.parsing.parse_tool_response`, e.g. to
replace an oversized tool output with a short notice.
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Union

from anthropic.types import ImageBlockParam, TextBlockParam

from llming_envelope.config import DEFAULT_CONFIG, EnvelopeConfig
from llming_envelope.parsing import parse_tool_response
from llming_envelope.tool_response import ToolResponseStatus, ToolResponseV2
from llming_envelope.utils.image_utils import detect_image_media_type

logger = logging.getLogger(__name__)

ContentBlock = Union[TextBlockParam, ImageBlockParam]

TRUNCATION_NOTICE = (
    "Tool Name: {tool_name} returned with status {tool_status} but the output was truncated "
    "to fit the context limit.\n"
    "In case it was a read file or write you can get the latest content by calling the tool again."
)


def is_text_block(block: Any) -> bool:
    """Check if a content block is a text block."""
    return isinstance(block, Mapping) and block.get("type") == "text"


def is_tool_response_v2(value: Any) -> bool:
    """Check if a value carries the fields of a ToolResponseV2."""
    if isinstance(value, ToolResponseV2):
        return True
    return isinstance(value, Mapping) and all(key in value for key in ("status", "toolName", "result"))


def tool_feedback_to_msg(status: Union[ToolResponseStatus, str],
                         config: Optional[EnvelopeConfig] = None) -> Callable[[str], str]:
    """Get the function turning a tool's text into the message for its status.

    :param status: The tool response status
    :param config: Envelope configuration holding the templates
    :return: Callable formatting a message with the status template
    """
    template = (config or DEFAULT_CONFIG).get_template(ToolResponseStatus(status).value)
    return lambda msg: template.format(msg=msg)


def format_tool_response(response: ToolResponseV2, config: Optional[EnvelopeConfig] = None) -> str:
    """Render the ``<toolResponse>`` envelope for a tool response."""
    config = config or DEFAULT_CONFIG
    message = tool_feedback_to_msg(response.status, config)(response.text or "")
    lines = [
        "<toolResponse>",
        f"<toolName>{response.toolName}</toolName>",
        f"<toolStatus>{response.status.value}</toolStatus>",
        f"<toolResult>{message}</toolResult>",
    ]
    if response.has_images:
        lines.append(config.image_marker)
    lines.append("</toolResponse>")
    return "\n".join(lines)


def tool_response_to_ai_state(response: Union[ToolResponseV2, Mapping],
                              config: Optional[EnvelopeConfig] = None) -> List[ContentBlock]:
    """Convert a tool response into content blocks for the next model request.

    Images get their media type from the file signature; unrecognized images
    use the configured default instead of being dropped.
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(response, ToolResponseV2):
        response = ToolResponseV2.model_validate(response)

    blocks: List[ContentBlock] = []
    if isinstance(response.text, str):
        blocks.append({"type": "text", "text": format_tool_response(response, config)})

    if response.images:
        blocks.append({"type": "text", "text": config.images_header})
        for image in response.images:
            blocks.append({
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": detect_image_media_type(image, default=config.default_image_media_type),
                    "data": image,
                },
            })
    return blocks


def truncate_tool_from_msg(blocks: Iterable[ContentBlock],
                           config: Optional[EnvelopeConfig] = None) -> List[ContentBlock]:
    """Replace the first tool response in a message with a truncation notice.

    Blocks before the tool response are kept, the tool response block is
    replaced by a notice naming the tool and its status, and all following
    blocks (e.g. the tool's images) are dropped.

    :raises ToolResponseParseError: If the tool response envelope is malformed
    """
    result: List[ContentBlock] = []
    for block in blocks:
        if is_text_block(block) and "<toolResponse>" in block["text"]:
            parsed = parse_tool_response(block["text"], config)
            logger.debug("Truncating output of tool %s (%s)", parsed.tool_name, parsed.tool_status)
            result.append({
                "type": "text",
                "text": TRUNCATION_NOTICE.format(tool_name=parsed.tool_name, tool_status=parsed.tool_status),
            })
            break
        result.append(block)
    return result
