"""Tests for rendering tool responses into content blocks."""
import base64

import pytest

from llming_envelope import (
    EnvelopeConfig,
    ToolResponseParseError,
    ToolResponseStatus,
    ToolResponseV2,
    parse_tool_response,
)
from llming_envelope.formatting import (
    format_tool_response,
    is_text_block,
    is_tool_response_v2,
    tool_feedback_to_msg,
    tool_response_to_ai_state,
    truncate_tool_from_msg,
)

PNG_BASE64 = base64.b64encode(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR").decode("ascii")
UNKNOWN_BASE64 = base64.b64encode(b"\x00\x01\x02\x03\x04\x05").decode("ascii")


class TestStatusMessages:
    """Tests for status message templates."""

    @pytest.mark.parametrize("status, expected", [
        ("rejected", "The Tool got rejected and returned the following message: m"),
        ("error", "The Tool encountered an error and returned the following message: m"),
        ("feedback", "The Tool returned the following feedback: m"),
        ("success", "The Tool was successful and returned the following message: m"),
    ])
    def test_templates(self, status, expected):
        assert tool_feedback_to_msg(status)("m") == expected
        assert tool_feedback_to_msg(ToolResponseStatus(status))("m") == expected

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            tool_feedback_to_msg("pending")

    def test_missing_template_in_config(self):
        config = EnvelopeConfig(status_templates={"success": "ok: {msg}"})
        assert tool_feedback_to_msg("success", config)("done") == "ok: done"
        with pytest.raises(KeyError):
            tool_feedback_to_msg("error", config)


class TestTypeGuards:
    """Tests for block and tool response type guards."""

    def test_is_text_block(self):
        assert is_text_block({"type": "text", "text": "hi"}) is True
        assert is_text_block({"type": "image", "source": {}}) is False
        assert is_text_block("text") is False
        assert is_text_block(None) is False

    def test_is_tool_response_v2(self):
        assert is_tool_response_v2({"status": "success", "toolName": "x", "result": None}) is True
        assert is_tool_response_v2(ToolResponseV2(toolName="x", status="success")) is True
        assert is_tool_response_v2({"status": "success", "toolName": "x"}) is False
        assert is_tool_response_v2(None) is False
        assert is_tool_response_v2("status toolName result") is False


class TestFormatToolResponse:
    """Tests for envelope rendering."""

    def test_envelope_layout(self):
        response = ToolResponseV2(toolName="readFile", status="success", text="contents")
        assert format_tool_response(response) == (
            "<toolResponse>\n"
            "<toolName>readFile</toolName>\n"
            "<toolStatus>success</toolStatus>\n"
            "<toolResult>The Tool was successful and returned the following message: contents</toolResult>\n"
            "</toolResponse>"
        )

    def test_marker_only_with_images(self):
        with_images = ToolResponseV2(toolName="shot", status="success", text="ok", images=[PNG_BASE64])
        without_images = ToolResponseV2(toolName="shot", status="success", text="ok", images=[])
        assert "check the images attached to the request" in format_tool_response(with_images)
        assert "check the images attached to the request" not in format_tool_response(without_images)

    @pytest.mark.parametrize("status", list(ToolResponseStatus))
    def test_round_trip(self, status):
        response = ToolResponseV2(toolName="runCommand", status=status, text="exit code 0\nstdout: hi")
        parsed = parse_tool_response(format_tool_response(response))
        assert parsed.tool_name == "runCommand"
        assert parsed.tool_status == status.value
        assert parsed.tool_result == tool_feedback_to_msg(status)("exit code 0\nstdout: hi")
        assert parsed.has_images is False


class TestToolResponseToAIState:
    """Tests for content block conversion."""

    def test_text_only(self):
        response = ToolResponseV2(toolName="readFile", status="success", result="x", text="contents")
        blocks = tool_response_to_ai_state(response)
        assert len(blocks) == 1
        assert blocks[0]["type"] == "text"
        assert "<toolName>readFile</toolName>" in blocks[0]["text"]

    def test_with_images(self):
        response = ToolResponseV2(toolName="screenshot", status="success", text="taken",
                                  images=[PNG_BASE64, UNKNOWN_BASE64])
        blocks = tool_response_to_ai_state(response)
        assert [b["type"] for b in blocks] == ["text", "text", "image", "image"]
        assert blocks[1]["text"] == "Images attached to the request:"
        assert blocks[2]["source"] == {"type": "base64", "media_type": "image/png", "data": PNG_BASE64}
        assert blocks[3]["source"]["media_type"] == "image/jpeg"
        assert blocks[3]["source"]["data"] == UNKNOWN_BASE64

        parsed = parse_tool_response(blocks[0]["text"])
        assert parsed.has_images is True

    def test_data_url_image_is_passed_through(self):
        data_url = "data:image/png;base64," + PNG_BASE64
        blocks = tool_response_to_ai_state(
            ToolResponseV2(toolName="t", status="success", text="x", images=[data_url]))
        assert blocks[-1]["source"]["media_type"] == "image/png"
        assert blocks[-1]["source"]["data"] == data_url

    def test_images_without_text(self):
        response = ToolResponseV2(toolName="screenshot", status="success", images=[PNG_BASE64])
        blocks = tool_response_to_ai_state(response)
        assert [b["type"] for b in blocks] == ["text", "image"]
        assert blocks[0]["text"] == "Images attached to the request:"

    def test_no_text_no_images(self):
        assert tool_response_to_ai_state(ToolResponseV2(toolName="noop", status="success")) == []

    def test_mapping_input(self):
        blocks = tool_response_to_ai_state(
            {"toolName": "listFiles", "status": "error", "result": None, "text": "denied"})
        parsed = parse_tool_response(blocks[0]["text"])
        assert parsed.tool_status == "error"
        assert parsed.tool_result.endswith("denied")

    def test_custom_default_media_type(self):
        config = EnvelopeConfig(default_image_media_type="image/png", images_header="Images:")
        blocks = tool_response_to_ai_state(
            ToolResponseV2(toolName="t", status="success", images=[UNKNOWN_BASE64]), config)
        assert blocks[0]["text"] == "Images:"
        assert blocks[1]["source"]["media_type"] == "image/png"


class TestTruncateToolFromMsg:
    """Tests for replacing tool output with a truncation notice."""

    def test_replaces_tool_response_and_drops_rest(self):
        response = ToolResponseV2(toolName="readFile", status="success", text="huge", images=[PNG_BASE64])
        blocks = [{"type": "text", "text": "Before"}] + tool_response_to_ai_state(response)
        truncated = truncate_tool_from_msg(blocks)
        assert len(truncated) == 2
        assert truncated[0] == {"type": "text", "text": "Before"}
        assert truncated[1]["type"] == "text"
        assert truncated[1]["text"].startswith(
            "Tool Name: readFile returned with status success but the output was truncated")
        assert "huge" not in truncated[1]["text"]

    def test_without_tool_response(self):
        blocks = [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]
        assert truncate_tool_from_msg(blocks) == blocks

    def test_malformed_tool_response(self):
        blocks = [{"type": "text", "text": "<toolResponse><toolName>x</toolName>"}]
        with pytest.raises(ToolResponseParseError):
            truncate_tool_from_msg(blocks)
