"""HateGuard CLI -- terminal front end for the live detector and dashboard."""

from __future__ import annotations

import json
import logging
import time

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from hateguard import __version__

console = Console()

DEFAULT_CLI_LATENCY = 2.0

_RISK_STYLES = {"high": "bold white on red", "medium": "black on yellow", "low": "green"}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _settings():
    from hateguard.config import get_settings
    from hateguard.errors import ConfigError

    try:
        return get_settings()
    except ConfigError as exc:
        raise click.ClickException(str(exc))


def _dashboard():
    from hateguard.dashboard import load_dashboard
    from hateguard.errors import DashboardError

    try:
        return load_dashboard()
    except DashboardError as exc:
        raise click.ClickException(str(exc))


def _bar(pct: float, width: int = 20) -> str:
    filled = round(pct / 100 * width)
    return "█" * filled + "░" * (width - filled)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    help="Logging level (default: HATEGUARD_LOG_LEVEL or WARNING)",
)
def main(log_level: str | None):
    """HateGuard -- Advanced Hate Speech Detection System.

    Analyze text with the demonstration classifier and browse the
    model's methodology, metrics and feature engineering.
    """
    _configure_logging((log_level or _settings().log_level).upper())


# ── Analyze ──────────────────────────────────────────────────────────


@main.command()
@click.argument("text", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--seed", type=int, default=None, help="Seed the random source for reproducible output")
@click.option("--delay", type=float, default=None, help="Simulated inference latency in seconds")
@click.option("--no-delay", is_flag=True, help="Skip the simulated inference latency")
@click.pass_context
def analyze(ctx: click.Context, text: str | None, as_json: bool, seed: int | None, delay: float | None, no_delay: bool):
    """Analyze TEXT for potential hate speech content.

    TEXT is read from stdin when omitted.
    """
    from hateguard.detection import ScoringEngine, get_default_engine
    from hateguard.errors import EmptyInputError

    if text is None:
        stdin = click.get_text_stream("stdin")
        text = "" if stdin.isatty() else stdin.read()

    settings = _settings()
    if no_delay:
        latency = 0.0
    elif delay is not None:
        latency = max(delay, 0.0)
    elif settings.latency_seconds is not None:
        latency = settings.latency_seconds
    else:
        latency = DEFAULT_CLI_LATENCY

    engine = ScoringEngine(seed=seed) if seed is not None else get_default_engine(settings.seed)

    try:
        result = engine.analyze(text)
    except EmptyInputError as exc:
        console.print(f"[bold red]Input Required:[/] {exc}")
        ctx.exit(1)

    if latency > 0:
        with console.status("[bold blue]Analyzing...[/]"):
            time.sleep(latency)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    colour = "red" if result.is_hate_speech else "green"
    risk = result.risk_level.value
    lines = [
        f"[bold {colour}]{result.prediction.label}[/]",
        f"Confidence: {result.confidence:.1f}%",
        f"[dim]{_bar(result.confidence)}[/]",
        f"Risk Level: [{_RISK_STYLES[risk]}] {risk.upper()} [/]",
    ]
    if result.triggered_features:
        badges = "  ".join(f"[reverse] {f.label} [/]" for f in result.triggered_features)
        lines.append(f"Detected Features: {badges}")

    console.print(Panel("\n".join(lines), title="Detection Result", border_style=colour))


# ── Dashboard ────────────────────────────────────────────────────────


@main.command()
def metrics():
    """Show model performance metrics and training details."""
    dash = _dashboard()

    table = Table(title="Model Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_column("")
    for name, value in dash.model_metrics.as_rows():
        table.add_row(name, f"{value:.1f}%", _bar(value))
    console.print(table)

    for title, rows in (
        ("Training Details", dash.training_details),
        ("Model Architecture", dash.model_architecture),
    ):
        detail = Table(title=title, show_header=False)
        detail.add_column("Field", style="dim")
        detail.add_column("Value")
        for key, value in rows.items():
            detail.add_row(f"{key}:", value)
        console.print(detail)


@main.command()
def methodology():
    """Show the machine learning pipeline steps."""
    dash = _dashboard()

    console.print("\n[bold blue]HateGuard[/] — Detection Methodology\n")
    for step in dash.methodology:
        console.print(f"  [bold cyan]{step.order}. {step.title}[/]")
        console.print(f"     {step.description}")


@main.command()
def features():
    """Show feature engineering importances and preprocessing checklists."""
    dash = _dashboard()

    table = Table(title="Feature Engineering")
    table.add_column("Feature", style="cyan")
    table.add_column("Importance", justify="right", style="green")
    table.add_column("")
    table.add_column("Description")
    for feature in dash.feature_engineering:
        table.add_row(feature.name, f"{feature.importance:.0f}%", _bar(feature.importance), feature.description)
    console.print(table)

    console.print("\n[bold]Preprocessing Steps:[/]")
    for item in dash.preprocessing:
        console.print(f"  [green]✓[/] {item}")

    console.print("\n[bold]Advanced Features:[/]")
    for item in dash.advanced_features:
        console.print(f"  [blue]✓[/] {item}")


@main.command()
def stats():
    """Show quick usage statistics."""
    dash = _dashboard()
    qs = dash.quick_stats

    table = Table(title="Quick Stats", show_header=False)
    table.add_column("Stat")
    table.add_column("Value", justify="right")
    table.add_row("Texts Analyzed Today", f"[bold]{qs.texts_analyzed_today:,}[/]")
    table.add_row("Hate Speech Detected", f"[bold red]{qs.hate_speech_detected:,}[/]")
    table.add_row("Model Uptime", f"[bold green]{qs.model_uptime:.1f}%[/]")
    console.print(table)


if __name__ == "__main__":
    main()
