"""mdBook preprocessor that runs shell commands and inlines their output."""

__version__ = "0.1.0"
