"""Allow ``python -m modulith_audit``; with no arguments, audits the current directory."""

from modulith_audit.cli.main import app

app(prog_name="modulith-audit")
