"""ASGI app wiring (FastAPI)."""
