"""
Django admin configuration for ToothSearch
"""
from .tooth_version_admin import ToothVersionAdmin
from .tag_admin import TagAdmin

__all__ = [
    'ToothVersionAdmin',
    'TagAdmin',
]
