from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def parse_object_id(value: str) -> Optional[ObjectId]:
    """None for anything that is not a valid ObjectId, so lookups fall through to not-found."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
