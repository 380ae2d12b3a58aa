"""Command-line interface for launchlight."""
