"""Typer CLI entrypoint for the slate pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .export import format_currency, total_cost
from .logging import configure_logging
from .pipeline import AuditLogger, CandidateLoadError

app = typer.Typer(help="Budget-aware hiring slate CLI.")


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSON array path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON report path.",
    ),
    csv: Optional[Path] = typer.Option(None, dir_okay=False, help="Write the selected slate as CSV."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    experience_weight: Optional[float] = typer.Option(None, min=0.0, help="Weight for matching job titles."),
    skills_weight: Optional[float] = typer.Option(None, min=0.0, help="Weight for matching skills."),
    salary_weight: Optional[float] = typer.Option(None, min=0.0, help="Weight for lower salary expectations."),
    diversity: Optional[bool] = typer.Option(
        None,
        "--diversity/--no-diversity",
        help="Prefer near-tied candidates from other locations.",
    ),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Score candidates and pick one per role."""
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
            if not isinstance(loaded, dict):
                raise typer.BadParameter("Config file must be a YAML object", param_name="config")
            settings = loaded

    overrides = {
        key: value
        for key, value in (
            ("experience", experience_weight),
            ("skills", skills_weight),
            ("salary", salary_weight),
        )
        if value is not None
    }
    if overrides:
        configured = settings.get("weights")
        settings["weights"] = {**(configured if isinstance(configured, dict) else {}), **overrides}
    if diversity is not None:
        settings["diversity"] = diversity

    configure_logging(log_level)

    try:
        container = create_container(settings=settings)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc

    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        result = pipeline.run(
            candidates_path=candidates,
            output_path=output,
            csv_path=csv,
            audit_logger=audit_logger,
        )
    except CandidateLoadError as exc:
        typer.echo(f"Could not read candidates: {'; '.join(exc.errors)}", err=True)
        raise typer.Exit(code=1) from exc

    cost = format_currency(total_cost(result.selected))
    typer.echo(
        f"Selected {len(result.selected)} of {len(result.by_category)} roles "
        f"(total cost {cost}). Report saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
