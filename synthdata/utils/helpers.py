# utils/helpers.py
import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def format_number(value) -> str:
    """
    Renders a number exactly as entered: integral floats drop the ".0"
    (1.0 becomes "1"), any other float keeps every digit of its repr.
    """
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)
