"""Allow running statreport as ``python -m statreport``."""

from statreport.cli.main import app

app(prog_name="stat")
