from typing import Any, Dict

from .constants import UserFields


def sanitize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Strip storage metadata from a document before it leaves the core

    The MongoDB ``_id`` becomes a string ``id`` and version markers are
    dropped. The input is left untouched; applying it twice is a no-op.

    Args:
        document: Raw or already sanitized document

    Returns:
        Sanitized copy of the document
    """
    sanitized = dict(document)

    if UserFields.MONGO_ID in sanitized:
        sanitized[UserFields.ID] = str(sanitized.pop(UserFields.MONGO_ID))

    sanitized.pop(UserFields.VERSION, None)

    return sanitized
