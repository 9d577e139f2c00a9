"""Find scripture references in text and fetch their verses."""

__version__ = "0.1.0"
