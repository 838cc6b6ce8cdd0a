"""Allow running as ``python -m colorwheel``."""

from colorwheel.cli import cli

if __name__ == "__main__":
    cli()
