"""Main entry point for launchlight."""

from launchlight.cli.main import cli

if __name__ == "__main__":
    cli()
