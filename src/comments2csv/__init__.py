"""Extract reviewer comments from Word and PowerPoint files into a CSV table."""

__version__ = "0.3.0"
