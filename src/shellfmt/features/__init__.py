"""Feature packages of shellfmt."""
