"""User interfaces for shellfmt."""
