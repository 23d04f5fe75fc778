"""Static-content normalization and validation pipeline."""

__version__ = "0.1.0"
