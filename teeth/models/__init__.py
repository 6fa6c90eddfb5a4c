"""
Catalog models for ToothSearch
"""
from .tag import Tag
from .tooth_version import ToothVersion

__all__ = [
    'Tag',
    'ToothVersion',
]
