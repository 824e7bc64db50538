"""Port for reading raw budget source text."""

from typing import Protocol


class BudgetSourcePort(Protocol):
    """Port returning the full text of a delimited source file."""

    def fetch_text(self, location: str) -> str:
        """Return the text stored at ``location``.

        Raises:
            SourceLoadError: If the source cannot be read.
        """


__all__ = ["BudgetSourcePort"]
