"""
Tabular Parser
compass/pipelines/csv_parser.py

Turns uploaded comma-delimited text into ordered header -> value mappings.

Quoting is handled with a single toggle: a '"' flips the in-quote state and is
otherwise dropped, and a ',' only splits a field outside quotes. Rows whose
field count differs from the header are discarded; the count of discarded rows
is reported back so callers can surface it, but never raised.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from compass.config import get_settings
from compass.pipelines.utils import strip_wrapping_quotes

logger = logging.getLogger(__name__)

Row = Dict[str, str]


@dataclass
class ParseResult:
    """Rows recovered from one or more files, plus the rows that were dropped."""
    rows: List[Row] = field(default_factory=list)
    dropped_rows: int = 0
    files: int = 0

    def merge(self, other: "ParseResult") -> "ParseResult":
        return ParseResult(
            rows=self.rows + other.rows,
            dropped_rows=self.dropped_rows + other.dropped_rows,
            files=self.files + other.files,
        )


def _clean_cell(cell: str) -> str:
    return strip_wrapping_quotes(cell.strip())


def split_line(line: str) -> List[str]:
    """Split one data line into cleaned fields, honouring quoted commas."""
    cells: List[str] = []
    current: List[str] = []
    in_quote = False

    for char in line:
        if char == '"':
            in_quote = not in_quote
        elif char == "," and not in_quote:
            cells.append(_clean_cell("".join(current)))
            current = []
        else:
            current.append(char)
    cells.append(_clean_cell("".join(current)))
    return cells


def parse_csv(text: str) -> ParseResult:
    """
    Parse one file's text.

    The first non-blank line is the header. Headers are split on every comma
    (they are not expected to contain quoted commas), trimmed, and unquoted.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) < 2:
        return ParseResult(files=1)

    headers = [_clean_cell(h) for h in lines[0].split(",")]
    rows: List[Row] = []
    dropped = 0

    for line in lines[1:]:
        cells = split_line(line)
        if len(cells) != len(headers):
            dropped += 1
            continue
        rows.append(dict(zip(headers, cells)))

    if dropped:
        logger.warning(f"Dropped {dropped} malformed row(s) out of {len(lines) - 1}")

    return ParseResult(rows=rows, dropped_rows=dropped, files=1)


def parse_files(texts: Sequence[str], max_workers: Optional[int] = None) -> ParseResult:
    """
    Parse several files concurrently and concatenate their rows in input order.

    Each parse is file-local, so scheduling has no effect on the result.
    """
    if not texts:
        return ParseResult()

    workers = max_workers or get_settings().PARSER_MAX_WORKERS
    with ThreadPoolExecutor(max_workers=min(workers, len(texts))) as pool:
        results = list(pool.map(parse_csv, texts))

    merged = ParseResult()
    for result in results:
        merged = merged.merge(result)

    logger.info(
        f"Parsed {merged.files} file(s): {len(merged.rows)} rows kept, "
        f"{merged.dropped_rows} dropped"
    )
    return merged
