"""bunnygraph — relation graph summarizer and pair suggester."""

__version__ = "0.3.0"
