import enum
import logging
from collections import Counter
from dataclasses import dataclass, replace
from functools import reduce
from typing import Optional

import regex

log = logging.getLogger(__name__)

# ---------------------------
# Sequence scan state
# ---------------------------

class Direction(enum.Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


# Alphabetic property (letters, letter numbers, vowel signs) or decimal digit
COUNTABLE = regex.compile(r"[\p{Alphabetic}\p{Nd}]")


def is_countable(c: str) -> bool:
    return COUNTABLE.fullmatch(c) is not None


@dataclass(frozen=True)
class SequenceState:
    """
    Rolling accumulator for the sequence scan.

    `current_len` is the length of the run ending at the last character seen,
    `max_len` the longest run so far. Each call to `step` returns a new state.
    """
    last_char: Optional[str] = None
    direction: Direction = Direction.NONE
    current_len: int = 0
    max_len: int = 0

    def step(self, c: str) -> "SequenceState":
        if not is_countable(c):
            return replace(self, last_char=None, direction=Direction.NONE, current_len=0)

        if self.last_char is None:
            return self._advance(c, Direction.NONE, 1)

        distance = ord(self.last_char) - ord(c)
        if abs(distance) != 1:
            return self._advance(c, Direction.NONE, 1)

        direction = Direction.DESCENDING if distance > 0 else Direction.ASCENDING
        if self.direction in (Direction.NONE, direction):
            length = self.current_len + 1
        else:
            # reversal: the last two characters still form a run in the new direction
            length = 2
        return self._advance(c, direction, length)

    def merge(self, other: "SequenceState") -> "SequenceState":
        """Combine two partial scans, keeping only the longer maximum."""
        return replace(self, max_len=max(self.max_len, other.max_len))

    def _advance(self, c: str, direction: Direction, length: int) -> "SequenceState":
        return SequenceState(
            last_char=c,
            direction=direction,
            current_len=length,
            max_len=max(self.max_len, length),
        )

# ---------------------------
# Metrics
# ---------------------------

def _require_text(password) -> None:
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")


def _require_limit(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, not {type(value).__name__}")


def max_repetition_count(password: str) -> int:
    """
    Number of occurrences of the most repeated character, case-sensitive.

    "Melbourne" -> 2
    "passwords" -> 3
    "Elephant"  -> 1 (one "E", one "e")
    """
    _require_text(password)
    freq = Counter(password)
    return max(freq.values(), default=0)


def max_sequence_length(password: str) -> int:
    """
    Length of the longest ascending or descending run of letters/digits.

    Case-insensitive ("AbCdEf" -> 6); any other character breaks the run
    ("ABC_DEF" -> 3). A password with countable characters but no sequential
    pair scores 1, an empty one 0.
    """
    _require_text(password)
    return reduce(SequenceState.step, password.lower(), SequenceState()).max_len


def is_password_permissible(password: str,
                            max_allowed_repetition_count: int,
                            max_allowed_sequence_length: int) -> bool:
    return check_password(password,
                          max_allowed_repetition_count,
                          max_allowed_sequence_length)["permissible"]


def check_password(password: str,
                   max_allowed_repetition_count: int,
                   max_allowed_sequence_length: int) -> dict:
    _require_text(password)
    _require_limit("max_allowed_repetition_count", max_allowed_repetition_count)
    _require_limit("max_allowed_sequence_length", max_allowed_sequence_length)

    repetitions = max_repetition_count(password)
    sequence = max_sequence_length(password)

    penalties = []
    if repetitions > max_allowed_repetition_count:
        penalties.append(
            f"Character repeated {repetitions} times (max {max_allowed_repetition_count}).")
    if sequence > max_allowed_sequence_length:
        penalties.append(
            f"Sequence of length {sequence} (max {max_allowed_sequence_length}).")

    permissible = not penalties
    log.debug("repetition_count=%d sequence_length=%d permissible=%s",
              repetitions, sequence, permissible)

    return {
        "repetition_count": repetitions,
        "sequence_length": sequence,
        "max_allowed_repetition_count": max_allowed_repetition_count,
        "max_allowed_sequence_length": max_allowed_sequence_length,
        "penalties": penalties,
        "permissible": permissible,
    }
