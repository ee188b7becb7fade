"""Allow ``python -m mk``."""

from mk.cli import run

run()
