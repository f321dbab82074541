"""Packaged per-language resource files."""
