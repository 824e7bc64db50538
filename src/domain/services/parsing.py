"""Parse delimited budget exports into field-named records.

The parser has no CSV dialect support: it splits on a fixed delimiter with
no quoting or escaping, so a literal delimiter inside a value shifts the row's
field count and the row is dropped.
"""

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.models.records import ParsedTable, RawRecord, RawValue

_CURRENCY_CHARS = str.maketrans("", "", "$,")
_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_BOM = "\ufeff"


def clean_value(raw: str) -> RawValue:
    """Normalize a single field value.

    Args:
        raw: Raw field text.

    Returns:
        RawValue: ``Decimal`` when the value, stripped of ``$`` and ``,``, is
        numeric (``Decimal("0")`` when empty); otherwise the trimmed text.
    """
    trimmed = raw.strip()
    cleaned = trimmed.translate(_CURRENCY_CHARS).strip()
    if not cleaned:
        return Decimal("0")
    if _NUMERIC_RE.match(cleaned):
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return trimmed
    return trimmed


def parse_delimited(
    raw_text: str,
    delimiter: str = ",",
    text_columns: Iterable[str] = (),
    logger: Logger | None = None,
) -> ParsedTable:
    """Parse delimited text with a header row.

    Args:
        raw_text: Full text of the source file.
        delimiter: Field separator.
        text_columns: Headers whose values stay trimmed text even when they
            look numeric, so account numbers keep leading zeros and a blank
            category stays blank.
        logger: Optional logger for skipped-row warnings.

    Returns:
        ParsedTable: Headers, retained records, and the skipped row count.
    """
    lines = [line for line in raw_text.splitlines() if line.strip()]
    if not lines:
        return ParsedTable(headers=())

    header_line = lines[0].lstrip(_BOM)
    headers = tuple(cell.strip() for cell in header_line.split(delimiter))
    keep_text = frozenset(text_columns)

    records: list[RawRecord] = []
    skipped = 0
    for line in lines[1:]:
        fields = line.split(delimiter)
        if len(fields) != len(headers):
            skipped += 1
            continue
        records.append(
            {
                header: value.strip() if header in keep_text
                else clean_value(value)
                for header, value in zip(headers, fields)
            }
        )

    if skipped and logger is not None:
        logger.warning(
            f"Skipped {skipped} rows whose field count does not match "
            f"the {len(headers)} header columns"
        )
    return ParsedTable(headers=headers, records=records, skipped_rows=skipped)


__all__ = ["clean_value", "parse_delimited"]
