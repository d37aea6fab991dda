"""Height map low point and basin analysis."""

__version__ = "0.1.0"
