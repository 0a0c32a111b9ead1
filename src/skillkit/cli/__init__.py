"""Command-line interface for skillkit."""
