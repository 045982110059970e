"""Core package: settings and logging configuration."""
