"""Users API: CRUD over a single `users` resource."""

__version__ = "0.1.0"
