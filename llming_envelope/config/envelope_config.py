from dataclasses import dataclass, field

IMAGE_MARKER = "check the images attached to the request"


@dataclass
class EnvelopeConfig:
    """Defines how tool responses are rendered into and read from envelope text."""
    image_marker: str = IMAGE_MARKER
    """Literal placed inside the envelope when the tool response carries images."""
    default_image_media_type: str = "image/jpeg"
    """Media type used when an image payload matches no known signature."""
    images_header: str = "Images attached to the request:"
    """Text block emitted in front of the image blocks."""
    status_templates: dict[str, str] = field(default_factory=lambda: {
        "rejected": "The Tool got rejected and returned the following message: {msg}",
        "error": "The Tool encountered an error and returned the following message: {msg}",
        "feedback": "The Tool returned the following feedback: {msg}",
        "success": "The Tool was successful and returned the following message: {msg}",
    })
    """Message templates per tool status. ``{msg}`` is replaced by the tool's text."""

    def get_template(self, status: str) -> str:
        """Get the message template for a tool status.

        :param status: The status value, e.g. "success"
        :return: The template string containing a ``{msg}`` placeholder
        :raises KeyError: If no template is configured for the status
        """
        try:
            return self.status_templates[status]
        except KeyError:
            raise KeyError(f"No message template configured for tool status {status!r}") from None


DEFAULT_CONFIG = EnvelopeConfig()
