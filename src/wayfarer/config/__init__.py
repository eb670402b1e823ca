"""Packaged configuration data: default settings and their JSON schema."""
