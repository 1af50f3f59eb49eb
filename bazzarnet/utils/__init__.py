"""
Utility helpers
"""

from .validators import to_object_id, as_reference

__all__ = ["to_object_id", "as_reference"]
