"""Bundled style configurations."""
