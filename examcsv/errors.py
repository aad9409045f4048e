# examcsv/errors.py
from __future__ import annotations


class ExamCsvError(ValueError):
    """
    Базовая ошибка разбора CSV с вопросами.
    """


class RecordLengthError(ExamCsvError):
    """
    Количество полей в записи не совпадает с заголовком.

    Единственная «восстановимая» ошибка: CsvFileSource ловит её
    и переключается на legacy-парсер.
    """

    def __init__(self, line: int, expected: int, actual: int) -> None:
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid Record Length: expect {expected}, got {actual} on line {line}"
        )


class MissingExplanationError(ExamCsvError):
    """
    Пустая колонка explanation. Фатально, всегда с номером строки файла.
    """

    def __init__(self, label: str, row_number: int) -> None:
        self.label = label
        self.row_number = row_number
        super().__init__(f"CSV {label}: pembahasan wajib diisi (baris {row_number}).")
