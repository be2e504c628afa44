"""HTTP adapter: handlers puros + routers FastAPI."""
