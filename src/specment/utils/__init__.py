"""Shared utilities: template processing, config merging, installation."""
