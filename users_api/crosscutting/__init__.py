"""Cross-cutting concerns: config, logging, errors, middleware."""
