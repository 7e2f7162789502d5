"""Corpus source handlers (ingesters) for contextpack."""

from pathlib import Path
from typing import Optional

from contextpack.ingesters.folder_ingester import FolderIngester
from contextpack.ingesters.zip_ingester import ZipIngester
from contextpack.protocols import Ingester

# Consulted in order; the first ingester that accepts a source wins.
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Return the first registered ingester that accepts ``source``, or None."""
    source_path = Path(source)
    return next((i for i in _INGESTERS if i.can_handle(source_path)), None)


def register_ingester(ingester: Ingester, first: bool = False) -> None:
    """Make a custom corpus source available to ``DocumentIndex.load``.

    Args:
        ingester: An object implementing the Ingester protocol
        first: Consult it before the built-in zip and folder ingesters, e.g.
               to read ``.zip`` sources with a different extension filter
    """
    if first:
        _INGESTERS.insert(0, ingester)
    else:
        _INGESTERS.append(ingester)


def unregister_ingester(ingester: Ingester) -> None:
    """Remove a previously registered ingester; unknown ingesters are ignored."""
    if ingester in _INGESTERS:
        _INGESTERS.remove(ingester)


__all__ = [
    "get_ingester",
    "register_ingester",
    "unregister_ingester",
    "ZipIngester",
    "FolderIngester",
]
