"""Version information for primitivekit."""

__version__ = "0.3.1"
