"""Allow running too-long as ``python -m too_long``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
