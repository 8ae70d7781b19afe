"""Near-real-time active user counts from Google Analytics 4."""

__version__ = "0.1.0"
