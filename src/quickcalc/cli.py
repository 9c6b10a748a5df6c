"""
Command-line interface for QuickCalc.

Provides commands for:
- Evaluating a single expression
- An interactive prompt
- Listing the available functions and constants
- Running the API server
"""

from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quickcalc.config import settings
from quickcalc.errors import EvalError
from quickcalc.evaluator import evaluate
from quickcalc.formatting import format_result
from quickcalc.log import configure_logging
from quickcalc.service import compute
from quickcalc.tokens import CONSTANTS, FUNCTIONS

app = typer.Typer(
    name="quickcalc",
    help="QuickCalc - evaluate expressions like '2sqrt(9)' or '45% of 120'",
    add_completion=False,
)

console = Console()

EXIT_WORDS = {"quit", "exit", "q"}

FUNCTION_HELP = {
    "sqrt": "square root",
    "cbrt": "cube root",
    "sin": "sine (radians)",
    "cos": "cosine (radians)",
    "tan": "tangent (radians)",
    "asin": "inverse sine",
    "acos": "inverse cosine",
    "atan": "inverse tangent",
    "sinh": "hyperbolic sine",
    "cosh": "hyperbolic cosine",
    "tanh": "hyperbolic tangent",
    "abs": "absolute value",
    "ln": "natural logarithm",
    "log": "base-10 logarithm",
    "log2": "base-2 logarithm",
    "exp": "e raised to x",
    "floor": "round down",
    "ceil": "round up",
    "round": "round to nearest, halves up",
    "deg": "radians to degrees",
    "rad": "degrees to radians",
}


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", "-l", help="Log level"),
):
    """Configure logging for every command."""
    configure_logging(log_level, settings.log_format)


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command(
    "eval",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def eval_expression(
    expression: List[str] = typer.Argument(..., help="Expression to evaluate"),
    raw: bool = typer.Option(False, "--raw", help="Print the full-precision float"),
):
    """Evaluate an expression and print the result."""
    text = " ".join(expression)
    try:
        value = evaluate(text)
    except EvalError as e:
        console.print(f"[red]Error ({e.kind}):[/] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(repr(value) if raw else format_result(value))


@app.command()
def repl():
    """Evaluate expressions interactively until 'quit' or end of input."""
    console.print("[bold]QuickCalc[/] - type an expression, or 'quit' to leave")
    while True:
        try:
            line = console.input("[cyan]>[/] ")
        except (EOFError, KeyboardInterrupt):
            break

        if line.strip().lower() in EXIT_WORDS:
            break

        result = compute(line)
        if result.ok:
            console.print(f"[green]= {result.formatted}[/]")
        elif result.error:
            console.print(f"[dim]{escape(result.error)}[/]")


@app.command()
def functions():
    """List the available functions and constants."""
    table = Table(title="Functions")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name in FUNCTIONS:
        table.add_row(f"{name}(x)", FUNCTION_HELP.get(name, ""))
    console.print(table)

    table = Table(title="Constants")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for name, value in CONSTANTS.items():
        table.add_row(name, format_result(value))
    console.print(table)


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
):
    """Start the QuickCalc API server."""
    import uvicorn

    console.print(f"[bold green]Starting QuickCalc server on {host}:{port}[/]")

    uvicorn.run(
        "quickcalc.api:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
