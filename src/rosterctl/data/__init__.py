"""Bundled sample data files, resolvable by base name."""
