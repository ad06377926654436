from .registry import RangeRegistry
from . import offsets

__all__ = ["RangeRegistry"]
