from __future__ import annotations
import csv
import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import yaml

from rcli.formats import OutputFormat


def read_records(lines: Iterable[str], delimiter: str = ",", header: bool = True) -> List[Any]:
    """Parse CSV rows; with ``header`` each row becomes a header->value mapping."""
    rows = csv.reader(lines, delimiter=delimiter)
    if not header:
        return [list(row) for row in rows]
    headers = next(rows, None)
    if headers is None:
        return []
    return [dict(zip(headers, row)) for row in rows]


def render_records(records: List[Any], format: Union[str, OutputFormat]) -> str:
    if OutputFormat.parse(format) is OutputFormat.YAML:
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    return json.dumps(records, indent=2, ensure_ascii=False)


def process_csv(
    input: str,
    output: Optional[str] = None,
    format: Union[str, OutputFormat] = OutputFormat.JSON,
    delimiter: str = ",",
    header: bool = True,
) -> Path:
    """Convert the CSV file ``input`` and write it to ``output``; returns the path written."""
    format = OutputFormat.parse(format)
    target = Path(output) if output else Path(f"output.{format.value}")
    with open(input, newline="", encoding="utf-8") as fh:
        records = read_records(fh, delimiter=delimiter, header=header)
    target.write_text(render_records(records, format), encoding="utf-8")
    return target
