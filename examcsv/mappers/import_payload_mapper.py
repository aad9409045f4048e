# examcsv/mappers/import_payload_mapper.py

from __future__ import annotations

from typing import Any, Dict, Sequence

from examcsv.models.enums import QuestionPool
from examcsv.models.question import ParsedQuestion


def questions_to_import_payload(
    questions: Sequence[ParsedQuestion],
    pool: QuestionPool,
) -> Dict[str, Any]:
    """
    Пачка вопросов в виде, в котором её ждёт шаг сохранения:

    {
      "pool": "tryout" | "practice",
      "totalQuestions": N,
      "questions": [
        {"prompt", "imageUrl", "explanation", "explanationImageUrl", "order",
         "options": [{"label", "imageUrl", "isCorrect"}, ...]},
        ...
      ]
    }
    """
    return {
        "pool": pool.value,
        "totalQuestions": len(questions),
        "questions": [q.to_dict() for q in questions],
    }
