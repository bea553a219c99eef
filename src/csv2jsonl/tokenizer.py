"""
Split a single CSV line into trimmed field strings.
"""

from typing import List

QUOTE = '"'
DELIMITER = ','

# Tab, line terminators, Unicode space separators (Zs) and the BOM.
# \x1c-\x1f and \x85 are field content, not padding.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def parse_csv_line(line: str) -> List[str]:
    """
    Tokenize one CSV line, honoring double-quoted fields.

    A doubled quote inside a quoted field is a literal quote. A comma outside
    quotes ends the current field. Every field is trimmed with ``trim`` at its
    boundary, quoted or not. An unterminated quote is accepted as-is.

    Args:
        line: One line of text without line terminators

    Returns:
        List of field values; never empty
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(trim("".join(current)))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append(trim("".join(current)))
    return fields
