# examcsv/datasources/legacy_csv.py
"""
Запасной разбор «сломанных» CSV, где автор оставил разделитель внутри
текста без кавычек.

Строка режется по каждому разделителю, а лишние куски приписываются
ближайшей текстовой колонке слева (prompt, explanation, варианты...).
Это эвристика: если лишние разделители есть в двух соседних текстовых
колонках, разбиение может получиться правдоподобным, но неверным.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from examcsv.datasources.base import RawRow
from examcsv.models.schema import is_text_column, resolve_headers
from examcsv.utils.parsing import first_content_line, split_lines
from examcsv.utils.text import normalize_cell


def extract_headers(content: str, delimiter: str) -> List[str]:
    """
    Заголовок из первой непустой строки (наивный split).
    Нет строки заголовка или она пустая -> CSV_HEADERS.
    """
    header_line = first_content_line(content)
    cells = [normalize_cell(cell) for cell in header_line.split(delimiter)]
    return resolve_headers(cells)


def split_legacy_line(line: str, delimiter: str, headers: Sequence[str]) -> RawRow:
    """
    Раскладывает одну строку по колонкам:
      - последняя колонка забирает все оставшиеся куски;
      - текстовая колонка жадно берёт куски, пока оставшихся кусков
        больше, чем оставшихся колонок;
      - прочие колонки берут ровно один кусок.
    """
    tokens = line.split(delimiter)
    last_index = len(headers) - 1
    row: RawRow = {}
    pos = 0

    for index, header in enumerate(headers):
        value: Optional[str]
        if index == last_index:
            value = delimiter.join(tokens[pos:])
            pos = len(tokens)
        elif is_text_column(header):
            chunk: List[str] = []
            while pos < len(tokens):
                chunk.append(tokens[pos])
                pos += 1
                if len(tokens) - pos <= last_index - index:
                    break
            value = delimiter.join(chunk)
        else:
            value = tokens[pos] if pos < len(tokens) else None
            pos += 1

        row.setdefault(header, normalize_cell(value))

    return row


def parse_legacy_rows(
    content: str,
    delimiter: str,
    headers: Sequence[str],
) -> List[RawRow]:
    # первая непустая строка — заголовок
    lines = split_lines(content)[1:]
    return [split_legacy_line(line, delimiter, headers) for line in lines]
