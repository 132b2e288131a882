"""Configuration loading and path policies for shellfmt."""
