"""In-memory multi-strategy product search engine."""

__version__ = "0.1.0"
