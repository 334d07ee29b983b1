# lexilabel/core/labels/__init__.py
"""
Label sets: layered, per-language collections of compiled label templates.
"""

from .label_set import GrammaticalLabelSet, LabelLayer, LabelRef
from .loader import GrammaticalLabelSetLoader

__all__ = ["GrammaticalLabelSet", "GrammaticalLabelSetLoader", "LabelLayer", "LabelRef"]
