"""Generators for the manifest, site configuration and sidebars."""
