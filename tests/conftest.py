from pathlib import Path
from typing import Callable, Union

import pytest


@pytest.fixture
def make_csv(tmp_path: Path) -> Callable[..., str]:
    """
    Пишет содержимое во временный файл и возвращает путь.
    Строки пишутся в UTF-8, bytes — как есть.
    """

    def _make(content: Union[str, bytes], name: str = "soal.csv") -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_bytes(content.encode("utf-8"))
        else:
            path.write_bytes(content)
        return str(path)

    return _make
