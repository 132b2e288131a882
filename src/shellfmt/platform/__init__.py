"""Platform services (logging) shared by every layer."""
