"""Utility functions for contextpack."""

from contextpack.utils.keywords import STOP_WORDS, extract_keywords
from contextpack.utils.text import decode_document

__all__ = ["decode_document", "extract_keywords", "STOP_WORDS"]
