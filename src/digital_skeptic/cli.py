"""CLI entrypoints for Digital Skeptic."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from digital_skeptic.config import load_settings
from digital_skeptic.errors import SkepticError
from digital_skeptic.logging import configure_logging, get_logger
from digital_skeptic.orchestrator.runner import run_analysis
from digital_skeptic.report.narration import to_narration
from digital_skeptic.report.render import render_markdown
from digital_skeptic.speech import estimated_minutes

app = typer.Typer(add_completion=False, help="Critical analysis of news articles")
logger = get_logger(__name__)


@app.callback()
def main() -> None:
    """Digital Skeptic: think critically about the news you read."""


@app.command()
def analyze(
    url: str = typer.Argument(..., help="Article URL to analyze."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
    narration: bool = typer.Option(False, "--narration", help="Print the narration text used for speech."),
    raw: bool = typer.Option(False, "--raw", help="Append the raw model output to the report."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the output to a file."),
) -> None:
    """Fetch an article, analyze it and print the report."""

    settings = load_settings()
    configure_logging(settings.log_level)

    logger.info("CLI analysis requested")

    try:
        result = run_analysis(url, settings=settings)
    except SkepticError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if as_json:
        text = json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2) + "\n"
    elif narration:
        text = to_narration(result.report, result.title) + "\n"
    else:
        text = render_markdown(result, include_raw=raw)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        typer.echo(str(output))
    else:
        typer.echo(text, nl=False)

    if narration and not as_json:
        typer.echo(f"Estimated listening time: ~{estimated_minutes(text)} min", err=True)


if __name__ == "__main__":
    app()
