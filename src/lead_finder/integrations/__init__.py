"""Integration package for external services."""
