from __future__ import annotations
import re
from typing import List

from examcsv.utils.text import strip_bom

COMMA = ","
SEMICOLON = ";"

# Минимум ';' в заголовке, чтобы поверить в «точку с запятой»
SEMICOLON_MIN_COUNT = 5

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(content: str) -> List[str]:
    """
    Делит текст на строки по \\n / \\r\\n: BOM и пробелы по краям убраны,
    пустые строки отброшены.
    """
    lines = (strip_bom(ln).strip() for ln in _LINE_BREAK_RE.split(content or ""))
    return [ln for ln in lines if ln]


def first_content_line(content: str) -> str:
    """
    Первая строка с непробельным содержимым (обычно заголовок) или "".
    """
    for ln in _LINE_BREAK_RE.split(content or ""):
        ln = strip_bom(ln)
        if ln.strip():
            return ln
    return ""


def detect_delimiter(content: str) -> str:
    """
    Выбор разделителя только по строке заголовка:
    ';' если их строго больше, чем ',', и не меньше SEMICOLON_MIN_COUNT,
    иначе ','.
    """
    header_line = first_content_line(content)
    comma_count = header_line.count(COMMA)
    semicolon_count = header_line.count(SEMICOLON)
    if semicolon_count > comma_count and semicolon_count >= SEMICOLON_MIN_COUNT:
        return SEMICOLON
    return COMMA
