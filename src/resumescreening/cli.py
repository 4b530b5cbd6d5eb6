"""Typer CLI entrypoint for the screening pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Resume screening and candidate ranking CLI.")


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."),
    requirements: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, help="Job requirements JSON or YAML path."
    ),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    json_logs: bool = typer.Option(True, "--json-logs/--console-logs", help="Render logs as JSON or for the console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Score candidates against job requirements and write a ranked report."""
    settings: dict[str, Any] = {}
    if config:
        try:
            loaded = ConfigManager(config.parent).load(config.name)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"Invalid YAML: {exc}", param_name="config") from exc
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level, json_output=json_logs)

    try:
        container = create_container(settings=settings)
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Invalid evaluator settings: {exc}", param_name="config") from exc
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    payload = pipeline.run(
        candidates_path=candidates,
        requirements_path=requirements,
        output_path=output,
        audit_logger=audit_logger,
    )
    summary = payload["report"]["summary"]
    recommended = summary["strong_hires"] + summary["hires"]
    typer.echo(
        f"Screened {summary['total_candidates']} candidates, {recommended} recommended for interview. "
        f"Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
