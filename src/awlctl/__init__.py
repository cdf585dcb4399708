"""awlctl — Active Window Layout Control."""

__version__ = "0.3.0"
