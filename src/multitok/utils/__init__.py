"""Shared helpers: typed errors, span utilities, character tables, logging."""
