# examcsv/mappers/question_mapper.py

from __future__ import annotations

import math
from typing import List, Optional

from examcsv.datasources.base import RawRow
from examcsv.errors import MissingExplanationError
from examcsv.models.enums import QuestionPool
from examcsv.models.question import Order, ParsedOption, ParsedQuestion
from examcsv.models.schema import (
    CORRECT_SUFFIX,
    IMAGE_SUFFIX,
    LEGACY_EXPLANATION_IMAGE,
    OPTION_KEY_ORDER,
    is_option_column,
)
from examcsv.utils.text import blank_to_none, normalize_boolean

PROMPT_PLACEHOLDER = "Soal {n}"


# --- Поля вопроса -------------------------------------------------------------


def _cell(row: RawRow, key: str) -> str:
    return (row.get(key) or "").strip()


def _parse_order(value: str) -> Optional[Order]:
    """
    '3' -> 3, '2.5' -> 2.5, '', 'abc', 'inf', 'nan', '1_000' -> None.
    """
    if "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _explanation_image(row: RawRow) -> Optional[str]:
    """
    explanationImageUrl, а если её нет/пусто — старая explanation_image.
    """
    return blank_to_none(row.get("explanationImageUrl")) or blank_to_none(
        row.get(LEGACY_EXPLANATION_IMAGE)
    )


# --- Варианты ответа ----------------------------------------------------------


def option_keys(row: RawRow) -> List[str]:
    """
    option_a..option_e, затем прочие option_* из строки в порядке появления,
    без повторов.
    """
    keys = list(OPTION_KEY_ORDER)
    for key in row:
        if is_option_column(key) and key not in keys:
            keys.append(key)
    return keys


def parse_options(row: RawRow) -> List[ParsedOption]:
    options: List[ParsedOption] = []
    for key in option_keys(row):
        label = _cell(row, key)
        if not label:
            continue
        options.append(
            ParsedOption(
                label=label,
                image_url=blank_to_none(row.get(f"{key}{IMAGE_SUFFIX}")),
                is_correct=normalize_boolean(row.get(f"{key}{CORRECT_SUFFIX}")),
            )
        )
    return options


# --- Сборка вопроса -----------------------------------------------------------


def row_to_question(row: RawRow, index: int, pool: QuestionPool) -> ParsedQuestion:
    """
    Собирает ParsedQuestion из строки CSV.

    index — позиция строки среди данных (с 0). В ошибке указывается
    номер строки файла: index + 2 (заголовок — строка 1).
    """
    explanation = _cell(row, "explanation")
    if not explanation:
        raise MissingExplanationError(pool.error_label, row_number=index + 2)

    order = _parse_order(_cell(row, "order"))

    return ParsedQuestion(
        prompt=_cell(row, "prompt") or PROMPT_PLACEHOLDER.format(n=index + 1),
        image_url=blank_to_none(row.get("prompt_image")),
        explanation=explanation,
        explanation_image_url=_explanation_image(row),
        order=order if order is not None else index + 1,
        options=parse_options(row),
    )
