"""Bundled data files for nuka-code."""
