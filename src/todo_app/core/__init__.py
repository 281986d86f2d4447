"""Application state and ports shared by connectors and handlers."""
