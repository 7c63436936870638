from .strength import (
    Direction,
    SequenceState,
    check_password,
    is_password_permissible,
    max_repetition_count,
    max_sequence_length,
)

__all__ = [
    "Direction",
    "SequenceState",
    "check_password",
    "is_password_permissible",
    "max_repetition_count",
    "max_sequence_length",
]
