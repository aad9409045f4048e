# examcsv/services/exam_csv_service.py

from __future__ import annotations

import logging
from typing import List

from examcsv.datasources.csv_file import CsvFileSource
from examcsv.mappers.question_mapper import row_to_question
from examcsv.models.enums import QuestionPool
from examcsv.models.question import ParsedQuestion

log = logging.getLogger(__name__)


def parse_questions(file_path: str, pool: QuestionPool) -> List[ParsedQuestion]:
    """
    Разбирает CSV-файл с вопросами для указанного пула.

    Ничего не сохраняет и не глушит ошибки: кодировка, битый CSV
    и пустой explanation поднимаются вызывающему как есть.
    """
    result = CsvFileSource(file_path).read()
    questions = [
        row_to_question(row, idx, pool) for idx, row in enumerate(result.rows)
    ]
    log.info(
        "CSV %s (%s): вопросов=%d, парсер=%s",
        file_path,
        pool.value,
        len(questions),
        result.parser.value,
    )
    return questions


def parse_tryout_csv(file_path: str) -> List[ParsedQuestion]:
    return parse_questions(file_path, QuestionPool.TRYOUT)


def parse_practice_csv(file_path: str) -> List[ParsedQuestion]:
    return parse_questions(file_path, QuestionPool.PRACTICE)
