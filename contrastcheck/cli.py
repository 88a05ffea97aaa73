"""CLI entry point — all commands defined here."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from contrastcheck import __version__
from contrastcheck.models import ContrastReport

app = typer.Typer(
    name="contrastcheck",
    help="WCAG color contrast checker.",
    no_args_is_help=True,
)
console = Console()

_STATUS_STYLE = {
    "pass": "[green]Pass[/green]",
    "fail": "[red]Fail[/red]",
    "unset": "[dim]-[/dim]",
}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"contrastcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """contrastcheck — WCAG contrast ratio and AA/AAA compliance."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def check(
    foreground: str = typer.Argument(..., help="Text color, e.g. '#333' or 'rgb(51, 51, 51)'."),
    background: str = typer.Argument(..., help="Background color."),
    criterion: Optional[List[str]] = typer.Option(  # noqa: UP007
        None, "--criterion", "-c", help="Criterion to check (repeatable). Defaults to config.",
    ),
    output_format: Optional[str] = typer.Option(  # noqa: UP007
        None, "--format", "-f", help="Output format: text, json or markdown.",
    ),
    report: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--report", "-o", help="Also write a report file (.json or .md).",
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", help="Path to a contrastcheck.yaml file.",
    ),
) -> None:
    """Compute the contrast ratio of two colors and check it against WCAG."""
    from contrastcheck.checker import check_contrast
    from contrastcheck.config import ContrastConfig
    from contrastcheck.models import Criterion

    if config is not None and not config.is_file():
        console.print(f"[red]File not found:[/red] {escape(str(config))}")
        raise typer.Exit(code=1)
    try:
        cfg = ContrastConfig.load(config)
    except ValidationError as exc:
        console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    try:
        criteria = [Criterion(c) for c in criterion] if criterion else cfg.criteria
    except ValueError as exc:
        console.print(f"[red]Unknown criterion:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    fmt = (output_format or cfg.output.report_format).lower()
    if fmt not in ("text", "json", "markdown"):
        console.print(f"[red]Unknown format:[/red] {escape(fmt)}")
        raise typer.Exit(code=1)

    result = check_contrast(foreground, background, criteria, precision=cfg.display.precision)

    if report is not None:
        from contrastcheck.reporter import write_json_report, write_markdown_report

        if report.suffix.lower() == ".json":
            write_json_report(result, report)
        else:
            write_markdown_report(result, report)

    if fmt == "json":
        import json

        from contrastcheck.reporter import report_to_dict

        typer.echo(json.dumps(report_to_dict(result), indent=2))
    elif fmt == "markdown":
        from contrastcheck.reporter import format_markdown

        typer.echo(format_markdown(result))
    else:
        _print_report(result)

    if not result.ok:
        raise typer.Exit(code=1)


def _print_report(result: ContrastReport) -> None:
    if result.ok:
        fg = result.foreground.color
        bg = result.background.color
        console.print(
            f"[bold]{result.display_ratio}:1[/bold]  "
            f"[{fg.to_hex()} on {bg.to_hex()}] {fg.to_hex()} on {bg.to_hex()} [/]"
        )

    from contrastcheck.compliance import THRESHOLDS

    table = Table(title="WCAG Contrast")
    table.add_column("Criterion", style="bold")
    table.add_column("Minimum")
    table.add_column("Result")
    for criterion, status in result.results.items():
        table.add_row(criterion.value, f"{THRESHOLDS[criterion]:g}:1", _STATUS_STYLE[status.value])
    console.print(table)

    severity_icon = {
        "warning": "[yellow]![/yellow]",
        "info": "[blue]i[/blue]",
    }
    for issue in result.issues:
        icon = severity_icon.get(issue.severity.value, " ")
        console.print(f"  {icon} {escape(issue.message)}", highlight=False)


@app.command()
def parse(
    color: str = typer.Argument(..., help="Color in hex, rgb(), hsl() or a CSS name."),
) -> None:
    """Show how a color string is interpreted."""
    from contrastcheck.models import ColorParseError
    from contrastcheck.parser import detect_format, parse_color

    result = parse_color(color)
    try:
        rgb = result.unwrap()
    except ColorParseError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        detected = detect_format(color)
        if detected is not None:
            console.print(f"[dim]Looks like {detected.value} notation, but a value is out of range.[/dim]")
        raise typer.Exit(code=1)

    table = Table(title=f"Color: {escape(color.strip())}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Format", result.format.value)
    table.add_row("RGB", rgb.css())
    table.add_row("Hex", rgb.to_hex())
    console.print(table)


@app.command()
def names(
    contains: Optional[str] = typer.Argument(None, help="Only show names containing this text."),  # noqa: UP007
) -> None:
    """List the recognised CSS color names."""
    from contrastcheck.named import NAMED_COLORS

    needle = (contains or "").strip().lower()
    matches = [(n, c) for n, c in sorted(NAMED_COLORS.items()) if needle in n]
    if not matches:
        console.print(f"[dim]No color names contain {escape(repr(needle))}.[/dim]")
        raise typer.Exit()

    table = Table(title="Named Colors")
    table.add_column("Name", style="bold")
    table.add_column("Hex")
    table.add_column("Swatch")
    for name, rgb in matches:
        table.add_row(name, rgb.to_hex(), f"[on {rgb.to_hex()}]      [/]")
    console.print(table)


@app.command()
def serve(
    port: int = typer.Option(8080, "--port", "-p", help="Port to serve on."),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to."),
) -> None:
    """Start the JSON web API."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]Web API requires extra dependencies.[/red]\n"
            "Install them with: [bold]pip install contrastcheck\\[web\\][/bold]"
        )
        raise typer.Exit(code=1)

    from contrastcheck.web.app import create_app

    console.print(f"[dim]Starting web API at http://{host}:{port}[/dim]")
    uvicorn.run(create_app(), host=host, port=port, log_level="warning")
