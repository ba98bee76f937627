"""docman — append a resolved, formatted reference list to a plain-text document."""

__version__ = "1.0.0"
