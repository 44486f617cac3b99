"""Command-line interface for the fleet console."""
