from enum import IntEnum


class Importance(IntEnum):
    """Priority level of an event. The integer value is the wire and storage encoding."""

    ORDINARY = 1
    IMPORTANT = 2
    CRITICAL = 3
