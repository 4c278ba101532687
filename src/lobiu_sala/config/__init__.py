"""Packaged configuration resources (default settings YAML)."""
