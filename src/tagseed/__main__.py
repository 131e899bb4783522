"""Allow ``python -m tagseed``."""

from tagseed.presentation.cli.app import cli

if __name__ == "__main__":
    cli()
