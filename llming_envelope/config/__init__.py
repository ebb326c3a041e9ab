from llming_envelope.config.envelope_config import EnvelopeConfig, DEFAULT_CONFIG, IMAGE_MARKER

__all__ = ["EnvelopeConfig", "DEFAULT_CONFIG", "IMAGE_MARKER"]
