"""
Map tokenized data rows onto header names.
"""

from typing import Dict, Sequence

from csv2jsonl.tokenizer import trim


def map_row(headers: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    """
    Build a record by pairing headers with values positionally.

    Missing trailing values become empty strings, extra values are dropped.
    Duplicate header names keep their first position and take the later value.
    """
    record: Dict[str, str] = {}
    for index, header in enumerate(headers):
        record[header] = values[index] if index < len(values) else ""
    return record


def has_content(record: Dict[str, str]) -> bool:
    """True when at least one value is non-empty after trimming"""
    return any(trim(value) != "" for value in record.values())
