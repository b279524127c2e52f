from datetime import datetime, timezone
from typing import Any


def _to_seconds(value: Any) -> float:
    # null, booleans and blank strings coerce the way JSON-producing tools treat
    # numbers: null/"" -> 0, true -> 1
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str) and value.strip() == "":
        return 0.0
    return float(value)


def epoch_to_iso_z(value: Any) -> str:
    """Convert unix seconds to an ISO-8601 UTC string with millisecond precision.

    `1700000000` -> `"2023-11-14T22:13:20.000Z"`. Numeric strings are accepted
    since page indexes often serialize every column as text. `None` maps to the
    epoch and booleans to 0/1.

    Raises ValueError if `value` is not numeric, NaN or out of range.
    """
    try:
        seconds = _to_seconds(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    try:
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
