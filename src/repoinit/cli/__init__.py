"""Command-line interface for repoinit."""
