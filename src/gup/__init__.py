"""Upload a single file to a GitHub repository through the Contents API."""

__version__ = "0.1.0"
