"""Application layer: services shared by every front end."""
