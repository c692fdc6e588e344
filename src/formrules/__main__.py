"""Allow ``python -m formrules``."""

from formrules.cli import cli

if __name__ == "__main__":
    cli()
