"""Allow ``python -m wordcap`` to run the CLI (the demo when given no arguments)."""

from wordcap.entrypoints.cli.main import wordcap

if __name__ == "__main__":
    wordcap()  # pylint: disable=no-value-for-parameter
