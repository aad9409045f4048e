from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence

from examcsv.models.enums import RowsParser

# Одна строка файла: имя колонки -> нормализованное значение
RawRow = Dict[str, str]


@dataclass(slots=True)
class RowsReadResult:
    rows: List[RawRow]
    parser: RowsParser
    delimiter: str


def build_row(headers: Sequence[str], cells: Sequence[str]) -> RawRow:
    """
    Склеивает заголовок и значения. При повторе имени колонки
    остаётся первое значение.
    """
    row: RawRow = {}
    for name, value in zip(headers, cells):
        row.setdefault(name, value)
    return row


class RowsDataSource:
    """
    Абстрактный источник строк с вопросами.
    """
    def read(self) -> RowsReadResult:
        raise NotImplementedError

    def fetch_rows(self) -> List[RawRow]:
        return self.read().rows
