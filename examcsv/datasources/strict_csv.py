# examcsv/datasources/strict_csv.py
from __future__ import annotations

import csv
import io
from typing import List, Optional, Sequence

from examcsv.datasources.base import RawRow, build_row
from examcsv.errors import RecordLengthError
from examcsv.models.schema import resolve_headers
from examcsv.utils.text import normalize_cell, strip_bom


class StrictCsvDialect(csv.excel):
    """
    Обычный CSV: двойные кавычки, "" внутри кавычек — литерал.
    strict=True: битые кавычки (в т.ч. незакрытые) -> csv.Error.
    """

    strict = True
    skipinitialspace = True


def _is_blank(record: Sequence[str]) -> bool:
    return len(record) <= 1 and not "".join(record).strip()


def parse_strict_rows(content: str, delimiter: str) -> List[RawRow]:
    """
    Разбирает текст как CSV с кавычками. Первая непустая запись — всегда
    заголовок; если все его ячейки пустые, берутся CSV_HEADERS.

    Несовпадение числа полей с заголовком -> RecordLengthError,
    любые другие csv.Error пробрасываются как есть.
    """
    reader = csv.reader(
        io.StringIO(strip_bom(content), newline=""),
        dialect=StrictCsvDialect,
        delimiter=delimiter,
    )

    headers: Optional[List[str]] = None
    rows: List[RawRow] = []

    for record in reader:
        if _is_blank(record):
            continue

        cells = [normalize_cell(value) for value in record]

        if headers is None:
            headers = resolve_headers(cells)
            continue

        if len(cells) != len(headers):
            raise RecordLengthError(
                line=reader.line_num,
                expected=len(headers),
                actual=len(cells),
            )

        rows.append(build_row(headers, cells))

    return rows
