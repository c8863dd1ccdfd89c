"""Command line interface for modulith-audit."""
