"""Shared building blocks used by every app (domain error taxonomy)."""
