"""Protocol definitions for extensible components."""

from contextpack.protocols.chunker import ChunkingStrategy
from contextpack.protocols.ingester import Ingester

__all__ = ["Ingester", "ChunkingStrategy"]
