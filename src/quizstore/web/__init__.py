"""Web API for the question store (FastAPI)."""
