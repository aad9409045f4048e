import re
from typing import Optional

BOM = "\ufeff"

_EDGE_QUOTES_RE = re.compile(r'^"+|"+$')

_TRUE_VALUES = {"true", "1", "y"}


def strip_bom(s: Optional[str]) -> str:
    if not s:
        return ""
    return s[1:] if s.startswith(BOM) else s


def normalize_cell(value: Optional[str]) -> str:
    """
    Нормализация значения ячейки:
    - None -> ""
    - убираем BOM в начале
    - срезаем подряд идущие кавычки в начале и в конце
      (косметика после выгрузок, не CSV-экранирование)
    - трим
    """
    return _EDGE_QUOTES_RE.sub("", strip_bom(value)).strip()


def normalize_boolean(value: Optional[str]) -> bool:
    """
    'TRUE' / ' 1 ' / 'y' -> True, всё остальное (включая пусто) -> False.
    """
    if not value:
        return False
    return value.strip().lower() in _TRUE_VALUES


def blank_to_none(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None
