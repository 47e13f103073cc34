import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from pagerduty_events.exceptions import SerializationError

JSON_COMPACT_SEPARATORS = (",", ":")


def pydantic_encoder(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)

    if is_dataclass(obj):
        return asdict(obj)  # type: ignore[arg-type]

    if isinstance(obj, datetime | date):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, Decimal):
        return float(obj)

    raise TypeError(
        f"Object of type '{obj.__class__.__name__}' is not JSON serializable"
    )


def json_dumps(
    data: Any,
    *,
    compact: bool = False,
    indent: int | None = None,
    sort_keys: bool = True,
) -> str:
    """Serialize data to a JSON formatted string.

    Values the stdlib encoder does not know (pydantic models, dataclasses,
    dates, enums, decimals) go through pydantic_encoder.

    Args:
        data: The data to serialize.
        compact: If True, use compact separators (no spaces).
        indent: If specified, pretty-print with this many spaces of indentation.
        sort_keys: Sort object keys. Array order is always preserved.

    Returns:
        JSON formatted string.

    Raises:
        SerializationError: If data contains content that cannot be encoded.
    """
    separators = JSON_COMPACT_SEPARATORS if compact else None
    try:
        return json.dumps(
            data,
            indent=indent,
            separators=separators,
            sort_keys=sort_keys,
            default=pydantic_encoder,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Unable to serialize event: {e}") from e


def json_loads(data: str | bytes) -> Any:
    """Deserialize JSON string to Python object.

    Args:
        data: JSON formatted string to deserialize.

    Returns:
        Python object (dict, list, str, int, float, bool, or None).

    Raises:
        json.JSONDecodeError: If data is not valid JSON.
    """
    return json.loads(data)
