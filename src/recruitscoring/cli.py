"""Typer CLI entrypoint for candidate scoring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config_file
from .container import ScoringContainer, create_container
from .core import ScoringResult
from .demo import sample_requests
from .logging import configure_logging
from .schemas import ScoringRequest

app = typer.Typer(help="Candidate scoring CLI.")


def _build_container(config: Optional[Path], log_level: str) -> ScoringContainer:
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = load_config_file(config).to_settings()
        except (yaml.YAMLError, ValidationError) as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc

    configure_logging(log_level)
    return create_container(settings=settings)


def render_result(request: ScoringRequest, result: ScoringResult) -> str:
    lines = [
        f"Candidate: {request.candidate.full_name}",
        f"Position: {request.position.title}",
        f"Process Type: {result.process_type}",
        f"Final Score: {result.score}",
        f"Approved: {'YES' if result.approved else 'NO'}",
        "",
        "Feedback:",
    ]
    lines.extend(f"  - {entry}" for entry in result.feedback)
    return "\n".join(lines)


@app.command()
def demo(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score the built-in technical and cultural sample requests."""
    container = _build_container(config, log_level)
    dispatcher = container.dispatcher()

    for idx, request in enumerate(sample_requests()):
        if idx:
            typer.echo("\n" + "=" * 60 + "\n")
        result = dispatcher.score(request)
        typer.echo(render_result(request, result))


@app.command()
def score(
    requests: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Scoring requests JSONL path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score every request in a JSON Lines file and print the results as JSON."""
    container = _build_container(config, log_level)
    report = container.batch().run(requests_path=requests)

    typer.echo(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    if report.errors:
        raise typer.Exit(code=1)


@app.command()
def extensions(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """List the process types with a registered rule extension."""
    container = _build_container(config, log_level)
    for process_type in container.extension_registry().process_types():
        typer.echo(process_type)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
