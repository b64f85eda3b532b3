"""Packaged configuration files (default config and rule tables)."""
