"""Build the account directory from chart-of-accounts records."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.budget import AccountDirectory, DirectoryEntry
from src.domain.models.columns import DirectoryColumns
from src.domain.models.records import RawRecord, RawValue
from src.domain.policies.label_filters import is_valid_label


def normalize_account_number(value: RawValue | None) -> str:
    """Return the account number as trimmed text.

    Numeric cells are parsed as ``Decimal``; they are rendered back without
    exponent so ``Decimal("100")`` and ``"100"`` join to the same key.
    """
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value).strip()


def build_account_directory(
    records: Iterable[RawRecord],
    columns: DirectoryColumns | None = None,
    logger: Logger | None = None,
) -> AccountDirectory:
    """Map account numbers to their category and department.

    Records with a blank account number, category, or department are dropped
    and counted. A repeated account number overwrites the earlier entry.

    Args:
        records: Parsed chart-of-accounts records.
        columns: Header names to read.
        logger: Optional logger for dropped and duplicate entries.

    Returns:
        AccountDirectory: Immutable lookup with diagnostic counts.
    """
    columns = columns or DirectoryColumns()
    entries: dict[str, DirectoryEntry] = {}
    invalid = 0
    duplicates = 0

    for record in records:
        account_number = normalize_account_number(
            record.get(columns.account_number)
        )
        category = record.get(columns.category)
        department = record.get(columns.department)
        if (
            not account_number
            or not is_valid_label(category)
            or not is_valid_label(department)
        ):
            invalid += 1
            continue
        if account_number in entries:
            duplicates += 1
        entries[account_number] = DirectoryEntry(
            category=category.strip(),
            department=department.strip(),
        )

    if logger is not None:
        if invalid:
            logger.warning(
                f"Dropped {invalid} chart-of-accounts rows missing an "
                f"account number, category, or department"
            )
        if duplicates:
            logger.info(
                f"{duplicates} duplicate account numbers; last row wins"
            )
        logger.info(f"Account directory built with {len(entries)} entries")

    return AccountDirectory(
        entries=entries,
        invalid_count=invalid,
        duplicate_count=duplicates,
    )


__all__ = ["build_account_directory", "normalize_account_number"]
