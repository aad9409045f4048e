# examcsv/datasources/csv_file.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from examcsv.datasources.base import RowsDataSource, RowsReadResult
from examcsv.datasources.legacy_csv import extract_headers, parse_legacy_rows
from examcsv.datasources.strict_csv import parse_strict_rows
from examcsv.errors import RecordLengthError
from examcsv.models.enums import RowsParser
from examcsv.utils.encoding import EncodingDetector, decode_bytes, detect_encoding
from examcsv.utils.parsing import detect_delimiter

log = logging.getLogger(__name__)


def read_rows(content: str, delimiter: str) -> RowsReadResult:
    """
    Строгий CSV-разбор, а при несовпадении длины записей — legacy-эвристика.
    Остальные ошибки разбора не перехватываются.
    """
    try:
        rows = parse_strict_rows(content, delimiter)
    except RecordLengthError as e:
        log.info("Строгий разбор не прошёл (%s), переключаемся на legacy-разбор", e)
        headers = extract_headers(content, delimiter)
        rows = parse_legacy_rows(content, delimiter, headers)
        return RowsReadResult(rows=rows, parser=RowsParser.LEGACY, delimiter=delimiter)

    return RowsReadResult(rows=rows, parser=RowsParser.STRICT, delimiter=delimiter)


@dataclass
class CsvFileSource(RowsDataSource):
    path: str
    encoding_detector: EncodingDetector = detect_encoding
    delimiter_detector: Callable[[str], str] = detect_delimiter

    def read(self) -> RowsReadResult:
        """
        Читает файл целиком, угадывает кодировку и разделитель,
        возвращает строки вместе с тем, каким парсером они получены.
        """
        raw = Path(self.path).read_bytes()
        content = decode_bytes(raw, self.encoding_detector)
        delimiter = self.delimiter_detector(content)

        result = read_rows(content, delimiter)
        log.debug(
            "CSV %s: разделитель=%r, парсер=%s, строк=%d",
            self.path,
            delimiter,
            result.parser.value,
            len(result.rows),
        )
        return result
