"""
TypeAdapter lookup shared by the entry points.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import TypeAdapter

from ..config import Config
from .raw_bytes import CONTEXT_KEY


@lru_cache(maxsize=256)
def _cached_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def get_adapter(type_: Any) -> TypeAdapter:
    """Return a TypeAdapter for ``type_``, cached when the type is hashable."""
    try:
        return _cached_adapter(type_)
    except TypeError:
        # unhashable annotation
        return TypeAdapter(type_)


def make_context(config: Optional[Config]) -> Dict[str, Any]:
    """Build the pydantic context carrying the conversion Config."""
    return {CONTEXT_KEY: config if config is not None else Config()}


__all__ = ["get_adapter", "make_context"]
