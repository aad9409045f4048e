from enum import Enum


class QuestionPool(str, Enum):
    TRYOUT = "tryout"
    PRACTICE = "practice"

    @property
    def error_label(self) -> str:
        """
        Метка пула в текстах ошибок (как видит её администратор).
        """
        return _ERROR_LABELS[self]


class RowsParser(str, Enum):
    STRICT = "strict"    # обычный CSV с кавычками
    LEGACY = "legacy"    # эвристика по позициям колонок


_ERROR_LABELS = {
    QuestionPool.TRYOUT: "tryout",
    QuestionPool.PRACTICE: "latihan",
}
