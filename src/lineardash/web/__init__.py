"""Web layer - FastAPI app serving the dashboard page."""
