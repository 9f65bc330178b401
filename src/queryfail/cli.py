from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from queryfail.assertions.checks import actual_error_code, actual_location
from queryfail.assertions.engine import count_expectations, evaluate_expectations
from queryfail.client import FailureInfo, QueryFailedError, load_failure_info
from queryfail.config.loader import load_expectations
from queryfail.spi import ErrorType, StandardErrorCode

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _print_failure(info: FailureInfo) -> None:
    code = actual_error_code(info)
    location = actual_location(info)
    table = Table(title="Failure", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Type", escape(info.type))
    table.add_row("Error code", str(code) if code is not None else "n/a")
    table.add_row("Error type", code.type.name if code is not None else "n/a")
    table.add_row("Location", str(location) if location is not None else "n/a")
    console.print(table)

    chain = Table(title="Cause Chain", show_lines=False)
    chain.add_column("#", justify="right")
    chain.add_column("Type")
    chain.add_column("Message")
    for depth, cause in enumerate(info.causes()):
        message = escape(cause.message) if cause.message else "[dim]<no message>[/dim]"
        chain.add_row(str(depth), escape(cause.type), message)
    console.print(chain)


@app.command()
def inspect(
    failure: str = typer.Argument(..., help="Path to a failure JSON document"),
) -> None:
    """Show the structured failure stored in a JSON document."""
    try:
        info = load_failure_info(Path(failure))
    except Exception as exc:
        console.print(f"[red]Failed to load failure:[/red] {exc}")
        raise typer.Exit(code=1)
    _print_failure(info)


@app.command()
def check(
    failure: str = typer.Argument(..., help="Path to a failure JSON document"),
    expectations: str = typer.Argument(..., help="Path to an expectations YAML file"),
) -> None:
    """Check a failure JSON document against expectations."""
    try:
        info = load_failure_info(Path(failure))
    except Exception as exc:
        console.print(f"[red]Failed to load failure:[/red] {exc}")
        raise typer.Exit(code=1)
    try:
        spec = load_expectations(Path(expectations))
    except Exception as exc:
        console.print(f"[red]Failed to load expectations:[/red] {exc}")
        raise typer.Exit(code=1)

    if spec.is_empty():
        console.print("[yellow]Warning:[/yellow] no expectations configured")

    results = evaluate_expectations(QueryFailedError(info), spec)
    table = Table(title="Expectations", show_lines=False)
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")
    failed = 0
    for name, failures in results:
        if failures:
            failed += 1
            details = "; ".join(item.message.splitlines()[0] for item in failures)
            table.add_row(name, "[red]FAIL[/red]", escape(details))
        else:
            table.add_row(name, "[green]PASS[/green]", "")
    console.print(table)
    console.print(f"{count_expectations(spec)} expectation(s), {failed} failed")

    raise typer.Exit(code=1 if failed else 0)


@app.command()
def codes(
    error_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Only list codes of this type (e.g. USER_ERROR)",
    ),
) -> None:
    """List the engine's standard error codes."""
    selected: ErrorType | None = None
    if error_type is not None:
        try:
            selected = ErrorType[error_type]
        except KeyError:
            console.print(f"[red]Unknown error type:[/red] {error_type}")
            raise typer.Exit(code=1)

    table = Table(title="Standard Error Codes", show_lines=False)
    table.add_column("Code", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    for supplier in StandardErrorCode:
        code = supplier.to_error_code()
        if selected is not None and code.type is not selected:
            continue
        table.add_row(str(code.code), code.name, code.type.name)
    console.print(table)
