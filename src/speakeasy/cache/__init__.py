"""Content-addressable result cache for synthesized audio."""

from .manager import AudioCache, compute_key
from .models import CacheEntry

__all__ = ["AudioCache", "CacheEntry", "compute_key"]
