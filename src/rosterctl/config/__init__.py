"""Configuration — models, file discovery, settings, and logging setup."""
