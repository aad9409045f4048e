# examcsv/cli.py
import csv
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from examcsv.config import Settings
from examcsv.errors import ExamCsvError
from examcsv.logging_config import setup_logging
from examcsv.mappers.import_payload_mapper import questions_to_import_payload
from examcsv.models.enums import QuestionPool
from examcsv.services.exam_csv_service import parse_questions

log = logging.getLogger(__name__)
app = typer.Typer(add_completion=False)

INVALID_CSV_MESSAGE = (
    "CSV soal tidak valid. Gunakan template terbaru dan pastikan format kolom sesuai."
)
EMPTY_CSV_MESSAGE = "CSV soal kosong atau tidak valid."

# Ошибки, которые показываем администратору как «CSV не валиден»
PARSE_ERRORS = (ExamCsvError, csv.Error, UnicodeDecodeError, LookupError)


def _run_import(
    file_path: Path,
    pool: QuestionPool,
    output: Optional[Path],
    limit: Optional[int],
) -> None:
    settings = Settings()
    setup_logging(settings)
    log.info("Разбор CSV %s для пула %s", file_path, pool.value)

    if not file_path.is_file():
        typer.echo(f"❌ Файл не найден: {file_path}")
        raise typer.Exit(code=1)

    size = file_path.stat().st_size
    if size > settings.max_file_bytes:
        typer.echo(
            f"❌ Файл слишком большой: {size} байт (лимит {settings.max_file_bytes})."
        )
        raise typer.Exit(code=1)

    try:
        questions = parse_questions(str(file_path), pool)
    except PARSE_ERRORS as e:
        log.warning("CSV %s отклонён: %s", file_path, e)
        typer.echo(f"❌ {INVALID_CSV_MESSAGE}")
        typer.echo(f"   {e}")
        raise typer.Exit(code=1)

    if not questions:
        typer.echo(f"❌ {EMPTY_CSV_MESSAGE}")
        raise typer.Exit(code=1)

    if limit is not None:
        questions = questions[:limit]

    payload = questions_to_import_payload(questions, pool)
    rendered = json.dumps(payload, ensure_ascii=False, indent=settings.json_indent)

    if output is None:
        typer.echo(rendered)
    else:
        output.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"✅ {len(questions)} soal disimpan ke {output}")

    log.info("Разбор CSV %s завершён: вопросов=%d", file_path, len(questions))


@app.command()
def tryout(
    file_path: Path = typer.Argument(..., help="CSV-файл с вопросами"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Куда записать JSON"),
    limit: Optional[int] = typer.Option(None, help="Сколько первых вопросов вывести"),
):
    """
    Разобрать CSV с вопросами для пула tryout и вывести JSON для импорта.
    """
    _run_import(file_path, QuestionPool.TRYOUT, output, limit)


@app.command()
def practice(
    file_path: Path = typer.Argument(..., help="CSV-файл с вопросами"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Куда записать JSON"),
    limit: Optional[int] = typer.Option(None, help="Сколько первых вопросов вывести"),
):
    """
    Разобрать CSV с вопросами для пула latihan (practice) и вывести JSON для импорта.
    """
    _run_import(file_path, QuestionPool.PRACTICE, output, limit)


def main():
    app()


if __name__ == "__main__":
    main()
