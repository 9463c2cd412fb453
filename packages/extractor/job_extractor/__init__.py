"""Job posting extractor service: URL in, structured job record out."""

__version__ = "1.0.0"
