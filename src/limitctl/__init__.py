"""limitctl — statute-of-limitations deadline calculator for administrative infractions."""

__version__ = "0.1.0"
