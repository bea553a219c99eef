import json
import logging

import pytest

from csv2jsonl import converter
from csv2jsonl.converter import convert_csv_text, convert_row, iter_row_outcomes, serialize_record, split_rows
from csv2jsonl.errors import EmptyInputError
from csv2jsonl.schemas.conversion import RowStatus


def test_single_row():
    result = convert_csv_text("a,b,c\n1,2,3")
    assert result.lines == '{"a":"1","b":"2","c":"3"}\n'
    assert result.count == 1
    assert result.skipped == []


def test_blank_lines_are_skipped_and_not_counted():
    result = convert_csv_text("a,b\n1,2\n\n   \n3,4\n")
    assert result.lines == '{"a":"1","b":"2"}\n{"a":"3","b":"4"}\n'
    assert result.count == 2


def test_short_row_fills_missing_fields():
    result = convert_csv_text("a,b,c\n1,2")
    assert result.lines == '{"a":"1","b":"2","c":""}\n'


def test_row_with_only_empty_values_is_excluded():
    result = convert_csv_text("a,b\n,\n1,\n")
    assert result.lines == '{"a":"1","b":""}\n'
    assert result.count == 1


def test_quoted_values():
    result = convert_csv_text('name,quote\n"Doe, Jane","he said ""hi"""')
    assert result.records() == [{"name": "Doe, Jane", "quote": 'he said "hi"'}]


def test_header_only_gives_empty_result():
    result = convert_csv_text("a,b,c\n")
    assert result.is_empty
    assert result.count == 0


def test_empty_input_raises():
    with pytest.raises(EmptyInputError, match="CSV file is empty"):
        convert_csv_text("")


def test_conversion_is_idempotent():
    text = 'id,name\n1,"A, B"\n\n2,C\n'
    first = convert_csv_text(text)
    second = convert_csv_text(text)
    assert first.lines == second.lines
    assert first.count == second.count


def test_emitted_lines_parse_back_to_records():
    text = 'k,v\nslash,"back\\slash"\nquote,"say ""x"""\ntab,"a\tb"\n'
    outcomes = [o for o in iter_row_outcomes(text) if o.status == RowStatus.CONVERTED]
    lines = convert_csv_text(text).lines.split("\n")[:-1]
    assert len(lines) == len(outcomes) == 3
    for line, outcome in zip(lines, outcomes):
        assert json.loads(line) == outcome.record


def test_values_stay_strings():
    result = convert_csv_text("n,flag,empty\n42,true,null")
    assert result.lines == '{"n":"42","flag":"true","empty":"null"}\n'


def test_non_ascii_is_written_verbatim():
    assert serialize_record({"name": "José"}) == '{"name":"José"}'


def test_crlf_matches_lf_output():
    assert convert_csv_text("a,b\r\n1,2\r\n3,4\r\n").lines == convert_csv_text("a,b\n1,2\n3,4\n").lines


def test_lone_carriage_return_splits_rows_when_normalizing():
    result = convert_csv_text("a,b\r1,2", normalize_newlines=True)
    assert result.lines == '{"a":"1","b":"2"}\n'


def test_lone_carriage_return_kept_without_normalizing():
    result = convert_csv_text("a,b\r1,2", normalize_newlines=False)
    assert result.is_empty


def test_split_rows():
    assert split_rows("") == []
    assert split_rows("a") == ["a"]
    assert split_rows("a\r\nb\rc\n") == ["a", "b", "c", ""]
    assert split_rows("a\r\nb", normalize_newlines=False) == ["a\r", "b"]


def test_convert_row_statuses():
    headers = ["a", "b"]
    assert convert_row(headers, "   ", 2).status == RowStatus.BLANK
    assert convert_row(headers, " , ", 3).status == RowStatus.NO_CONTENT
    outcome = convert_row(headers, "1,2", 4)
    assert outcome.status == RowStatus.CONVERTED
    assert outcome.included
    assert outcome.record == {"a": "1", "b": "2"}
    assert outcome.line_number == 4


def test_row_outcome_line_numbers_are_physical():
    numbers = [o.line_number for o in iter_row_outcomes("a\n1\n\n2")]
    assert numbers == [2, 3, 4]


def test_malformed_row_is_skipped_and_reported(monkeypatch, caplog):
    real_parse = converter.parse_csv_line

    def flaky_parse(line):
        if "BAD" in line:
            raise ValueError("cannot tokenize")
        return real_parse(line)

    monkeypatch.setattr(converter, "parse_csv_line", flaky_parse)

    with caplog.at_level(logging.WARNING):
        result = convert_csv_text("a,b\n1,2\nBAD,row\n3,4\n")

    assert result.count == 2
    assert result.lines == '{"a":"1","b":"2"}\n{"a":"3","b":"4"}\n'
    assert len(result.skipped) == 1
    skipped = result.skipped[0]
    assert skipped.line_number == 3
    assert skipped.content == "BAD,row"
    assert "cannot tokenize" in skipped.reason

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("Skipped malformed line 3" in r.getMessage() for r in warnings)
    assert warnings[-1].extra_fields["content"] == "BAD,row"


def test_preview_and_size():
    text = "n\n" + "\n".join(str(i) for i in range(1, 9))
    result = convert_csv_text(text)
    assert result.count == 8
    assert result.preview(5).splitlines() == ['{"n":"%d"}' % i for i in range(1, 6)]
    assert result.preview(0) == ""
    assert result.size_bytes == len(result.lines)
    assert result.size_mb == pytest.approx(result.size_bytes / 1024 / 1024)


def test_unicode_line_separators_inside_values_round_trip():
    line_sep, next_line = chr(0x2028), chr(0x85)
    text = "a,b\nx%sy,z\nx%sy,w\n" % (line_sep, next_line)
    result = convert_csv_text(text)
    assert result.count == 2
    assert result.records() == [
        {"a": "x%sy" % line_sep, "b": "z"},
        {"a": "x%sy" % next_line, "b": "w"},
    ]
    assert len(result.preview(5).split("\n")) == 3
