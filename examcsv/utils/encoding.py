# examcsv/utils/encoding.py
from __future__ import annotations

import logging
from typing import Callable, Optional

import chardet

log = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

# Все варианты написания UTF-8, которые отдают детекторы
_UTF8_ALIASES = {"UTF8", "UTF-8", "UTF_8", "UTF-8-SIG", "UTF_8_SIG"}

EncodingDetector = Callable[[bytes], Optional[str]]


def detect_encoding(raw: bytes) -> Optional[str]:
    """
    Определение кодировки через chardet. None, если угадать не удалось.
    """
    result = chardet.detect(raw)
    log.debug("chardet.detect -> %s", result)
    return result.get("encoding")


def resolve_encoding(detected: Optional[str]) -> str:
    if not detected:
        return DEFAULT_ENCODING
    if detected.strip().upper() in _UTF8_ALIASES:
        return DEFAULT_ENCODING
    return detected


def decode_bytes(raw: bytes, detector: EncodingDetector = detect_encoding) -> str:
    """
    Декодирует содержимое файла в текст по угаданной кодировке.

    Неизвестное имя кодировки (LookupError) и битые байты (UnicodeDecodeError)
    не глушим: молча испорченный текст хуже явной ошибки.
    """
    encoding = resolve_encoding(detector(raw))
    log.debug("Декодируем %d байт как %s", len(raw), encoding)
    return raw.decode(encoding)
