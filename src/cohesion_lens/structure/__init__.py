"""Class structure model and skeleton loading."""

from .loader import LoadResult, load_structures, structure_from_dict
from .models import Attribute, ClassStructure, Method

__all__ = [
    "Attribute",
    "ClassStructure",
    "Method",
    "LoadResult",
    "load_structures",
    "structure_from_dict",
]
