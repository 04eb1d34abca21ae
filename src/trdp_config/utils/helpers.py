import math
import uuid
from pathlib import PurePath
from typing import Any, Optional, Sequence, Union

Number = Union[int, float]


def to_list(value: Any) -> Sequence[Any]:
    """
    Treat an absent, single or repeated document node as a sequence.

    A single child tag cannot be told apart from a list of one once the
    document has been parsed, so every repeated tag is read through here.

    Args:
        value: None, a single node, or a list/tuple of nodes

    Returns:
        [] for None, the sequence itself for a list/tuple, else [value]
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return value
    return [value]


def to_number(value: Any) -> Optional[Number]:
    """
    Best-effort conversion of a loosely typed scalar to a number.

    Returns None (never 0) when the value is missing or does not denote a
    finite number, so callers can tell "zero" from "missing".

    Examples:
        to_number("42") -> 42
        to_number(" 3.5 ") -> 3.5
        to_number("0x10") -> 16
        to_number("abc") -> None
        to_number(None) -> None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    # int() and float() accept digit separators, document values do not
    if not text or '_' in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        # 0x, 0o and 0b integer literals
        return int(text, 0)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def generate_config_id() -> str:
    """Generate a unique identifier for an uploaded configuration."""
    return str(uuid.uuid4())


def stored_file_name(config_id: str, original_name: str, default_ext: str = ".xml") -> str:
    """
    Name under which an upload is written to disk.
    Format: {config_id}{extension of the original name}
    Example: 0b6f..-..e1.xml
    """
    extension = PurePath(original_name).suffix or default_ext
    return f"{config_id}{extension}"
