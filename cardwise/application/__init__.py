"""Application layer: use cases, services and collaborator protocols."""
