"""shellfmt: batch formatter for shell scripts built on shfmt."""

__version__ = "0.1.0"
