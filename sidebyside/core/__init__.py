"""Core: configuration and constants."""
