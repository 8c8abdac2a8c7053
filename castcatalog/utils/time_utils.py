"""Duration conversion utilities."""

from functools import lru_cache


@lru_cache(maxsize=4096)
def seconds_to_display(seconds: int) -> str:
    """Convert a duration in seconds to 'M:SS', or 'H:MM:SS' from one hour."""
    if seconds < 0:
        seconds = 0
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def seconds_to_ms(seconds: float) -> int:
    """Convert seconds (float) to integer milliseconds."""
    return int(round(seconds * 1000))


def parse_duration(text: str) -> int:
    """Parse 'SS', 'M:SS' or 'H:MM:SS' into whole seconds.

    Raises:
        ValueError: If the text has more than three parts, a part is not a
            non-negative integer, or minutes/seconds are out of range.

    Example:
        >>> parse_duration('1:02:03')
        3723
    """
    text = text.strip()
    parts = text.split(":")
    if not text or len(parts) > 3:
        raise ValueError(f"Expected SS, M:SS or H:MM:SS, got '{text}'")

    try:
        values = [int(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Invalid duration '{text}': {e}")

    if any(v < 0 for v in values):
        raise ValueError(f"Duration parts cannot be negative: '{text}'")
    if len(values) > 1 and any(v >= 60 for v in values[1:]):
        raise ValueError(f"Minutes and seconds must be below 60: '{text}'")

    total = 0
    for value in values:
        total = total * 60 + value
    return total
