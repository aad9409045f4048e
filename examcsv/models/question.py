from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Order = Union[int, float]


@dataclass(slots=True)
class ParsedOption:
    """
    Вариант ответа. Создаётся только при непустом label.
    """

    label: str
    image_url: Optional[str] = None
    is_correct: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "imageUrl": self.image_url,
            "isCorrect": self.is_correct,
        }


@dataclass(slots=True)
class ParsedQuestion:
    """
    Один вопрос из CSV.

    explanation всегда непустой (иначе строка не разбирается),
    order — число из колонки order или позиция строки + 1.
    """

    prompt: str                                  # "prompt" или "Soal {n}"
    explanation: str                             # "explanation"
    order: Order                                 # "order"
    image_url: Optional[str] = None              # "prompt_image"
    explanation_image_url: Optional[str] = None  # "explanationImageUrl"
    options: List[ParsedOption] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt": self.prompt,
            "imageUrl": self.image_url,
            "explanation": self.explanation,
            "explanationImageUrl": self.explanation_image_url,
            "order": self.order,
            "options": [opt.to_dict() for opt in self.options],
        }
