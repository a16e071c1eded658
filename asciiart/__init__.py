"""asciiart — image to ASCII art conversion."""

__version__ = "0.1.0"
