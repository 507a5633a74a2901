"""Vocabulary lookups for vertical-agnostic UI code."""

from typing import Optional

from core.business.registry import resolve_vertical_config
from patterns.domain_config import ServiceKey, Vocabulary


def get_vocabulary(vertical: Optional[str], key: ServiceKey) -> str:
    """Return the display term for ``key`` in the given vertical.

    Raises KeyError for a key outside the seven defined ones: that is a
    bug in the caller, not bad tenant data.
    """
    if key not in Vocabulary.keys():
        raise KeyError(f"Unknown vocabulary key: {key!r}")
    return getattr(resolve_vertical_config(vertical).vocabulary, key)


def vocabulary_for(vertical: Optional[str]) -> dict[str, str]:
    return resolve_vertical_config(vertical).vocabulary.as_dict()
