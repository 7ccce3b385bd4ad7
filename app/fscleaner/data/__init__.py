"""Bundled data files for fscleaner."""
