"""Domain models for parsed tabular sources."""

from dataclasses import dataclass, field
from decimal import Decimal

RawValue = Decimal | str
RawRecord = dict[str, RawValue]


@dataclass(frozen=True)
class ParsedTable:
    """Result of parsing a delimited text source.

    Attributes:
        headers: Header cells in file order.
        records: One record per retained data row, keyed by header.
        skipped_rows: Data rows dropped because their field count did not
            match the header.
    """

    headers: tuple[str, ...]
    records: list[RawRecord] = field(default_factory=list)
    skipped_rows: int = 0


__all__ = ["RawValue", "RawRecord", "ParsedTable"]
