"""GreenBite REST API (FastAPI)."""
