# examcsv/models/schema.py
from __future__ import annotations

from typing import Dict, List, Sequence

OPTION_PREFIX = "option_"
CORRECT_SUFFIX = "_correct"
IMAGE_SUFFIX = "_image"

OPTION_KEY_ORDER: List[str] = [f"option_{letter}" for letter in "abcde"]

# Заголовок по умолчанию (если в файле его нет) и порядок колонок шаблона
CSV_HEADERS: List[str] = [
    "prompt",
    "prompt_image",
    "explanation",
    "explanationImageUrl",
    "order",
] + [
    col
    for key in OPTION_KEY_ORDER
    for col in (key, f"{key}{IMAGE_SUFFIX}", f"{key}{CORRECT_SUFFIX}")
]

# Старое имя колонки картинки к пояснению
LEGACY_EXPLANATION_IMAGE = "explanation_image"

# Колонки со свободным текстом, где автор может оставить «голый» разделитель
TEXT_COLUMNS = frozenset(
    [
        "prompt",
        "prompt_image",
        "explanation",
        "explanationImageUrl",
        LEGACY_EXPLANATION_IMAGE,
    ]
    + [col for key in OPTION_KEY_ORDER for col in (key, f"{key}{IMAGE_SUFFIX}")]
)

_KNOWN_COLUMNS: Dict[str, str] = {
    name.lower(): name for name in CSV_HEADERS + [LEGACY_EXPLANATION_IMAGE]
}


def canonical_column(name: str) -> str:
    """
    'ExplanationImageURL' -> 'explanationImageUrl'. Неизвестные имена
    возвращаются как есть.
    """
    return _KNOWN_COLUMNS.get(name.lower(), name)


def is_option_column(name: str) -> bool:
    """
    Колонка варианта: всё, что начинается с option_ и не *_correct
    (option_a, option_f, option_custom, а также option_a_image).
    """
    return name.startswith(OPTION_PREFIX) and not name.endswith(CORRECT_SUFFIX)


def is_text_column(name: str) -> bool:
    # дополнительные варианты и их картинки тоже свободный текст
    return name in TEXT_COLUMNS or is_option_column(name)


def resolve_headers(cells: Sequence[str]) -> List[str]:
    """
    Имена колонок из нормализованных ячеек строки заголовка.

    Пустой заголовок (нет строки или все ячейки пустые) -> CSV_HEADERS.
    """
    if not any(cells):
        return list(CSV_HEADERS)
    return [canonical_column(c) for c in cells]
