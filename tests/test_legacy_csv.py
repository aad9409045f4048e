from examcsv.datasources.legacy_csv import extract_headers, parse_legacy_rows, split_legacy_line
from examcsv.models.schema import CSV_HEADERS

HEADERS = ["explanation", "order", "option_a", "option_a_correct", "option_b", "option_b_correct"]


def test_extra_token_absorbed_by_text_column():
    row = split_legacy_line("Penjumlahan, dasar,1,2,true,3,false", ",", HEADERS)
    assert row == {
        "explanation": "Penjumlahan, dasar",
        "order": "1",
        "option_a": "2",
        "option_a_correct": "true",
        "option_b": "3",
        "option_b_correct": "false",
    }


def test_last_column_swallows_trailing_tokens():
    headers = ["order", "option_a_correct"]
    row = split_legacy_line("1,true,extra,more", ",", headers)
    assert row == {"order": "1", "option_a_correct": "true,extra,more"}


def test_missing_tokens_become_empty():
    row = split_legacy_line("Hanya penjelasan", ",", HEADERS)
    assert row["explanation"] == "Hanya penjelasan"
    assert row["order"] == ""
    assert row["option_b_correct"] == ""


def test_non_text_column_takes_single_token():
    # order не текстовая колонка: лишний кусок уходит дальше, в option_a
    headers = ["order", "option_a", "option_a_correct"]
    row = split_legacy_line("1,2,3,true", ",", headers)
    assert row == {"order": "1", "option_a": "2,3", "option_a_correct": "true"}


def test_first_text_column_with_room_takes_the_excess():
    headers = ["prompt", "explanation", "order", "option_a", "option_a_correct"]
    row = split_legacy_line("Apa 1+1?,Penjumlahan, dasar,1,2,true", ",", headers)
    # лишний кусок уходит в самую левую текстовую колонку,
    # но order и варианты не съезжают
    assert row["prompt"] == "Apa 1+1?,Penjumlahan"
    assert row["explanation"] == "dasar"
    assert row["order"] == "1"
    assert row["option_a"] == "2"
    assert row["option_a_correct"] == "true"


def test_cells_are_normalized():
    row = split_legacy_line('"1";"Pembahasan; panjang"', ";", ["order", "explanation"])
    assert row == {"order": "1", "explanation": "Pembahasan; panjang"}


def test_extract_headers_from_file():
    headers = extract_headers('\ufeff"prompt";"Explanation";order\nA;B;1', ";")
    assert headers == ["prompt", "explanation", "order"]


def test_extract_headers_keeps_unrecognised_names():
    assert extract_headers("Pertanyaan,Pembahasan,1", ",") == ["Pertanyaan", "Pembahasan", "1"]


def test_extract_headers_defaults_for_missing_or_blank_header():
    assert extract_headers("", ",") == CSV_HEADERS
    assert extract_headers("  \n", ",") == CSV_HEADERS
    assert extract_headers(";;;\nA;B;C;D", ";") == CSV_HEADERS


def test_parse_legacy_rows_skips_header_and_blank_lines():
    content = "explanation,order\r\n\r\nA, B,1\r\n  \r\nC,2\r\n"
    rows = parse_legacy_rows(content, ",", ["explanation", "order"])
    assert rows == [
        {"explanation": "A, B", "order": "1"},
        {"explanation": "C", "order": "2"},
    ]
