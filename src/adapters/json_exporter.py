"""JSON export of demo results and wrapper output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from core.domain.models import ApiModel, DemoSummary


def to_jsonable(value: Any) -> Any:
    """Plain JSON data for wrapper results (models, lists of models, dicts)."""

    if isinstance(value, ApiModel):
        return value.to_wire()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def dumps(value: Any) -> str:
    return json.dumps(to_jsonable(value), ensure_ascii=False, indent=2)


def export_summary_json(*, summary: DemoSummary, output_path: Path) -> Path:
    """Write `DemoSummary` as UTF-8 JSON with stable formatting."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = summary.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
