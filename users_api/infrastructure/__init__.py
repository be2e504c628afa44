"""Infrastructure layer (adapters: PostgreSQL, in-memory)."""
