from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class RecordId:
    """Strongly-typed vocabulary record identifier.

    Zero is the placeholder for a record the store has not assigned an id to yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("RecordId must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for a record that has not been stored yet."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        """Whether the store has assigned this id."""
        return self.value > 0
