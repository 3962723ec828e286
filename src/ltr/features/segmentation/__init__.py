# Path: `src/ltr/features/segmentation/__init__.py`
# Summary: Export segmentation domain and use case symbols.
# Why: Provide a stable import surface for services and tests.

from .domain.unit_kind import UnitKind
from .usecases.segmenter import Segmenter, is_blank

__all__ = ["Segmenter", "UnitKind", "is_blank"]
