"""Export helpers for scan results."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, MutableMapping, Optional, Union

import pandas as pd

from .models import ResultBundle, bundle_to_rows

PathLike = Union[str, Path]

EXPORT_COLUMNS = ["category", "value", "platform", "icon", "page_url", "page_title", "timestamp"]

_JSON_SUFFIXES = {".json"}
_CSV_SUFFIXES = {".csv", ".tsv"}
_EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def bundle_to_dataframe(bundle: ResultBundle) -> pd.DataFrame:
    """Convert a result bundle into a :class:`pandas.DataFrame`, one row per item."""

    records: List[MutableMapping[str, object]] = []
    for row in bundle_to_rows(bundle):
        record: MutableMapping[str, object] = {
            "category": row.category,
            "value": row.value,
            "platform": row.platform,
            "icon": row.icon,
        }
        record.update(row.metadata)
        records.append(record)
    return pd.DataFrame(records, columns=EXPORT_COLUMNS)


def write_bundle(
    path: PathLike,
    bundle: ResultBundle,
    *,
    sheet_name: str = "Contacts",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write *bundle* to JSON, CSV/TSV, or Excel depending on the file extension."""

    output_path = Path(path)
    suffix = output_path.suffix.lower()
    if suffix not in _JSON_SUFFIXES | _CSV_SUFFIXES | _EXCEL_SUFFIXES:
        raise ValueError(f"Unsupported export file extension: {suffix or '(none)'}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix in _JSON_SUFFIXES:
        output_path.write_text(
            json.dumps(bundle.to_payload(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        return output_path

    exporter_kwargs = dict(exporter_kwargs or {})
    dataframe = bundle_to_dataframe(bundle)

    if suffix in _CSV_SUFFIXES:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        dataframe.to_csv(output_path, index=False, **exporter_kwargs)
        return output_path

    engine = exporter_kwargs.pop("engine", None) or "openpyxl"
    dataframe.to_excel(output_path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
    return output_path


__all__ = ["EXPORT_COLUMNS", "bundle_to_dataframe", "write_bundle"]
