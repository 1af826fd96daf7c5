"""Frame composition and pricing engine for custom picture framing."""

__version__ = "1.0.0"
