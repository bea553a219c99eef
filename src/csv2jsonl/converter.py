"""
CSV to JSON Lines conversion.

Single pass over the input text: the first line supplies the field names,
every later non-blank line becomes one JSON object. Problems with a single
line never abort the whole conversion; they are reported as skipped rows.
"""

import json
import time
from typing import Dict, Iterator, List, Optional, Sequence

from csv2jsonl.config import get_config
from csv2jsonl.errors import EmptyInputError
from csv2jsonl.mapper import has_content, map_row
from csv2jsonl.schemas.conversion import ConversionResult, RowOutcome, RowStatus, SkippedRow
from csv2jsonl.tokenizer import parse_csv_line, trim
from csv2jsonl.utils.logger import get_logger, log_performance, log_skipped_row

logger = get_logger(__name__)


def split_rows(text: str, normalize_newlines: bool = True) -> List[str]:
    """
    Split CSV text into physical lines.

    With ``normalize_newlines`` the \\r\\n and lone \\r terminators are turned
    into \\n first. The empty string has no lines at all.
    """
    if text == "":
        return []
    if normalize_newlines:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def serialize_record(record: Dict[str, str]) -> str:
    return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


def convert_row(headers: Sequence[str], line: str, line_number: int) -> RowOutcome:
    """Tokenize and map one data line; never raises"""
    stripped = trim(line)
    if not stripped:
        return RowOutcome(line_number=line_number, status=RowStatus.BLANK, content=line)

    try:
        record = map_row(headers, parse_csv_line(stripped))
    except Exception as e:
        return RowOutcome(
            line_number=line_number,
            status=RowStatus.MALFORMED,
            content=line,
            reason=f"{type(e).__name__}: {e}",
        )

    if not has_content(record):
        return RowOutcome(line_number=line_number, status=RowStatus.NO_CONTENT, content=line)
    return RowOutcome(line_number=line_number, status=RowStatus.CONVERTED, content=line, record=record)


def _resolve_normalize(normalize_newlines: Optional[bool]) -> bool:
    if normalize_newlines is None:
        return get_config().converter.normalize_newlines
    return normalize_newlines


def iter_row_outcomes(text: str, normalize_newlines: Optional[bool] = None) -> Iterator[RowOutcome]:
    """
    Yield one RowOutcome per data line (every line after the header).

    Raises:
        EmptyInputError: If the text splits into zero lines
    """
    rows = split_rows(text, _resolve_normalize(normalize_newlines))
    if not rows:
        raise EmptyInputError("CSV file is empty")

    headers = parse_csv_line(trim(rows[0]))
    for index in range(1, len(rows)):
        yield convert_row(headers, rows[index], index + 1)


def convert_csv_text(text: str, normalize_newlines: Optional[bool] = None) -> ConversionResult:
    """
    Convert CSV text into JSON Lines.

    Args:
        text: Full CSV file contents, already decoded
        normalize_newlines: Override the configured line ending policy

    Returns:
        ConversionResult with the JSONL text, the emitted row count and the
        malformed rows that were skipped

    Raises:
        EmptyInputError: If the text splits into zero lines
    """
    start = time.perf_counter()
    output: List[str] = []
    skipped: List[SkippedRow] = []

    for outcome in iter_row_outcomes(text, normalize_newlines):
        if outcome.status == RowStatus.CONVERTED:
            output.append(serialize_record(outcome.record) + "\n")
        elif outcome.status == RowStatus.MALFORMED:
            skipped.append(SkippedRow(
                line_number=outcome.line_number,
                content=outcome.content,
                reason=outcome.reason or "",
            ))
            log_skipped_row(logger, outcome.line_number, outcome.content, outcome.reason)

    result = ConversionResult(lines="".join(output), count=len(output), skipped=skipped)
    log_performance(logger, "convert_csv_text", time.perf_counter() - start,
                    records_processed=result.count, skipped_rows=len(skipped))
    return result
