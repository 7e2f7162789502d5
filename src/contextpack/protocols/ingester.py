"""Protocol for corpus source handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class Ingester(Protocol):
    """Protocol for corpus source handlers.

    Implementations turn a source (zip archive, folder, ...) into
    ``(identifier, raw_text)`` pairs. Uses structural subtyping - no
    inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[tuple[str, str]]:
        """Yield ``(identifier, raw_text)`` pairs from the source.

        Raises IngestError if the source as a whole cannot be read.
        Unreadable individual members are logged and skipped.
        """
        ...
