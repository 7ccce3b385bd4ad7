"""Allow running fscleaner as ``python -m fscleaner``."""

from fscleaner.cli.main import app

app(prog_name="fscleaner")
