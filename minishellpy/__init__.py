"""A small shell prompt with a quote-aware tokenizer, command builder and debugger."""

__version__ = "0.1.0"

__all__ = ["__version__"]