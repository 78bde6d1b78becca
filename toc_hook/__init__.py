"""Pre-commit hook that refreshes Markdown tables of contents."""

__version__ = "0.1.0"
