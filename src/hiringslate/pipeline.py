"""Slate pipeline assembly and execution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import TeamSelectionResult, TeamSelector, WeightConfig
from .export import serialize_result, to_csv
from .schemas import Candidate


class CandidateLoadError(ValueError):
    """Raised when the candidate file is not a usable candidate collection."""

    def __init__(self, errors: list[str], partial: list[Candidate] | None = None):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial or []

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {'; '.join(self.errors)}"


class CandidateLoader:
    """Load candidate records from a JSON array file."""

    def load(self, path: Path) -> list[Candidate]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise CandidateLoadError([f"invalid JSON ({exc})"]) from exc
        except UnicodeDecodeError as exc:
            raise CandidateLoadError([f"unreadable candidate file ({exc})"]) from exc
        return self.parse(data)

    def parse(self, data: Any) -> list[Candidate]:
        if not isinstance(data, list):
            raise CandidateLoadError(
                [f"expected a JSON array of candidates, got {type(data).__name__}"]
            )

        candidates: list[Candidate] = []
        errors: list[str] = []
        for idx, record in enumerate(data, start=1):
            if not isinstance(record, dict):
                errors.append(f"record {idx}: expected an object, got {type(record).__name__}")
                continue
            try:
                candidates.append(Candidate.model_validate(record))
            except ValidationError as exc:
                errors.append(f"record {idx}: {exc}")
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates


class OutputWriter:
    """Persist selection reports."""

    def write_json(self, path: Path, payload: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default),
            encoding="utf-8",
        )

    def write_text(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")


class SlatePipeline:
    """Load candidates, select a slate and write the reports."""

    def __init__(
        self,
        *,
        selector: TeamSelector,
        weights: Mapping[str, float] | WeightConfig | None = None,
        diversity: bool | None = None,
        candidate_loader: CandidateLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._selector = selector
        self._weights = (
            weights if isinstance(weights, WeightConfig) else WeightConfig.from_mapping(weights)
        )
        self._diversity = True if diversity is None else diversity
        self._candidates = candidate_loader or CandidateLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    @property
    def weights(self) -> WeightConfig:
        return self._weights

    @property
    def diversity(self) -> bool:
        return self._diversity

    def run(
        self,
        *,
        candidates_path: Path,
        output_path: Path,
        csv_path: Path | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> TeamSelectionResult:
        load_errors: list[str] = []
        try:
            candidates = self._candidates.load(candidates_path)
        except CandidateLoadError as exc:
            if not exc.partial:
                raise
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        weights = self._weights.normalized()
        result = self._selector.select(candidates, weights, self._diversity)

        payload = serialize_result(result)
        payload["metadata"] = {
            "candidate_count": len(candidates),
            "weights": weights.as_dict(),
            "diversity": self._diversity,
            "errors": load_errors,
            "timestamp": pendulum.now(),
            "app_version": __version__,
        }
        self._writer.write_json(output_path, payload)

        if csv_path is not None:
            self._writer.write_text(csv_path, to_csv(result.selected))

        if audit_logger:
            for row in result.selected:
                audit_logger.append(
                    {
                        "category": row.category,
                        "index": row.index,
                        "name": row.name,
                        "location": row.location,
                        "salary": row.salary,
                        "score": row.score,
                        "nudged": row.category in result.nudged_categories,
                    }
                )

        self._logger.info(
            "pipeline.completed",
            candidate_count=len(candidates),
            selected=len(result.selected),
            open_categories=list(result.open_categories),
        )
        return result


def _json_default(value):  # type: ignore[override]
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
