"""Interfaces layer: adaptadores de entrada (HTTP)."""
