"""Core engine, configuration and utilities."""
