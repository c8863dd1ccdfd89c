"""Main CLI entry point for modulith-audit."""

import typer
from rich.console import Console

from modulith_audit.cli import audit, gate

app = typer.Typer(
    name="modulith-audit",
    help="Audit a front-end project tree and gate its deployment.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="audit")(audit.audit_cmd)
app.command(name="gate")(gate.gate_cmd)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    plain_logs: bool = typer.Option(
        False,
        "--plain-logs",
        envvar="MODULITH_AUDIT_PLAIN_LOGS",
        help="Write timestamped single-line logs instead of rich output",
    ),
) -> None:
    """
    modulith-audit: project audit and deployment gating.

    - [bold]audit[/bold]: Run the checklist and print the report
    - [bold]gate[/bold]: Decide whether the project may be deployed

    Without a command, audits the current directory.
    """
    from modulith_audit.cli.utils import fail
    from modulith_audit.utils.logging import configure_logging, resolve_level

    try:
        configure_logging(level=resolve_level(verbose, quiet), plain=plain_logs)
    except ValueError as e:
        raise fail(str(e))

    if ctx.invoked_subcommand is None:
        audit.run_audit_command()


@app.command()
def version() -> None:
    """Show the modulith-audit version."""
    from modulith_audit import __version__

    console.print(f"modulith-audit version {__version__}")


if __name__ == "__main__":
    app()
