"""Extraction of tagged blocks from envelope text.

The scan counts nesting depth so that a block whose content echoes its own tag
(e.g. a tool result that contains a previous ``<toolResult>`` envelope) is
returned in full instead of being cut at the first inner closing tag.
"""
import logging

from llming_envelope.errors import MalformedTagError, MissingTagError

logger = logging.getLogger(__name__)


def extract_tag(text: str, tag: str) -> str:
    """Return the trimmed content between the first ``<tag>`` and its matching ``</tag>``.

    :param text: Text containing the tagged block
    :param tag: Tag name without angle brackets, e.g. "toolResult"
    :return: Content between the opening tag and its matching closing tag
    :raises MissingTagError: If ``<tag>`` does not occur in the text
    :raises MalformedTagError: If the opening tag is never closed
    """
    start_tag = f"<{tag}>"
    end_tag = f"</{tag}>"

    start_index = text.find(start_tag)
    if start_index == -1:
        raise MissingTagError(tag)

    content_start = start_index + len(start_tag)
    end_index = -1
    depth = 1
    pos = content_start

    while depth > 0 and pos < len(text):
        next_start = text.find(start_tag, pos)
        next_end = text.find(end_tag, pos)

        if next_end == -1:
            raise MalformedTagError(tag, f"Malformed XML: Missing closing tag for {tag}")

        if next_start != -1 and next_start < next_end:
            depth += 1
            pos = next_start + len(start_tag)
        else:
            depth -= 1
            if depth == 0:
                end_index = next_end
            pos = next_end + len(end_tag)

    if end_index == -1:
        logger.debug("Tag %s still open at depth %d when the text ended", tag, depth)
        raise MalformedTagError(tag, f"Malformed XML: Unable to find matching end tag for {tag}")

    return text[content_start:end_index].strip()
