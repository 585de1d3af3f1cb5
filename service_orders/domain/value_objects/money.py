from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """Amount in integer minor units (cents)."""

    cents: int

    def __post_init__(self):
        object.__setattr__(self, 'cents', self._normalize(self.cents))

    @staticmethod
    def _normalize(value: int | str) -> int:
        if isinstance(value, bool):
            raise TypeError("Money amount must be an integer number of cents")
        if isinstance(value, str):
            value = int(value)
        if not isinstance(value, int):
            raise TypeError("Money amount must be an integer number of cents")
        return value

    @classmethod
    def zero(cls) -> 'Money':
        return cls(0)

    @classmethod
    def from_cents(cls, value: int | str) -> 'Money':
        return cls(value)

    def add(self, other: 'Money') -> 'Money':
        return Money(self.cents + other.cents)

    def to_major(self) -> float:
        return self.cents / 100

    def __str__(self) -> str:
        return f"{self.to_major():.2f}"

    def __repr__(self) -> str:
        return f"Money({self})"
