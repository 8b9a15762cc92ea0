"""Result type returned by the use cases instead of raising across layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a completed step and carries its value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents an aborted step and carries the error that stopped it."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """Re-raise the stored error."""
        if isinstance(self.error, Exception):
            raise self.error
        raise Exception(str(self.error))


Result = Union[Success[T], Failure[E]]
