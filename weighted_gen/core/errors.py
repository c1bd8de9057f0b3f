from __future__ import annotations

from enum import Enum


class InvalidInputKind(str, Enum):
    NULL_INPUT = "null_input"
    EMPTY_INPUT = "empty_input"
    LENGTH_MISMATCH = "length_mismatch"
    INFINITE_WEIGHT = "infinite_weight"
    NOT_A_NUMBER_WEIGHT = "not_a_number_weight"
    OUT_OF_RANGE_WEIGHT = "out_of_range_weight"
    ALL_ZERO_WEIGHT = "all_zero_weight"


DEFAULT_MESSAGES: dict[InvalidInputKind, str] = {
    InvalidInputKind.NULL_INPUT: "An input array is null",
    InvalidInputKind.EMPTY_INPUT: "An input array is empty",
    InvalidInputKind.LENGTH_MISMATCH: "Numbers and probabilities arrays are not the same size",
    InvalidInputKind.INFINITE_WEIGHT: "A probability is infinite",
    InvalidInputKind.NOT_A_NUMBER_WEIGHT: "A probability is NaN",
    InvalidInputKind.OUT_OF_RANGE_WEIGHT: "A probability is not in range [0;1]",
    InvalidInputKind.ALL_ZERO_WEIGHT: "All probabilities are zero",
}


class InvalidInputError(ValueError):
    """Raised when a sampler cannot be built from the given values and weights."""

    def __init__(self, kind: InvalidInputKind, message: str | None = None, index: int | None = None) -> None:
        self.kind = kind
        self.index = index
        text = message or DEFAULT_MESSAGES[kind]
        if index is not None:
            text = f"{text} (index {index})"
        super().__init__(text)
