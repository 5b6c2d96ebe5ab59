"""Minimal reader for the bundled delimited tables.

Tables are a header row followed by comma-separated lines. There is no
quoting or escaping: fields must not contain commas or newlines.
"""

import re
from pathlib import Path

_LINE_SPLIT = re.compile(r"\r?\n")


def read_table(path: Path) -> list[dict[str, str]]:
    """Read a whole table into memory as a list of header-keyed rows.

    Missing trailing columns are filled with "". Raises OSError when the
    file cannot be read and ValueError when it has no header.
    """
    text = Path(path).read_text(encoding="utf-8").strip()
    if not text:
        raise ValueError(f"Empty table: {path}")

    header_line, *lines = _LINE_SPLIT.split(text)
    headers = header_line.split(",")

    rows: list[dict[str, str]] = []
    for line in lines:
        cols = line.split(",")
        rows.append({h: cols[i] if i < len(cols) else "" for i, h in enumerate(headers)})
    return rows
