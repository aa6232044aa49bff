"""Great-circle route ordering service."""

__version__ = "0.1.0"
