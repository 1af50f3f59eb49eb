from typing import Any, Optional, Union

from bson.objectid import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Return value as an ObjectId, or None when it is not a valid 24-hex id"""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def as_reference(value: Any) -> Union[ObjectId, str]:
    """
    Reference value for a foreign key. Ids issued by the auth service are
    usually ObjectIds but are kept as plain strings when they are not.
    """
    object_id = to_object_id(value)
    return object_id if object_id is not None else str(value)
