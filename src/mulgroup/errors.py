"""Failure signals for subgroup construction.

A closed set of error kinds, each carrying its fixed description.
"""

from enum import Enum


class ErrorKind(Enum):
    NOT_PRIME = 'p is not prime'
    NOT_FACTOR = 'n is not a factor of p-1'
    INVALID_ARGUMENT = 'invalid argument'
    GENERATOR_NOT_FOUND = 'no generator found'

    @property
    def description(self) -> str:
        return self.value


class SubgroupError(ValueError):
    """Raised when a subgroup (or one of its ingredients) cannot be built.

    `kind` is the ErrorKind; `detail` is an optional free-form suffix.
    """

    def __init__(self, kind: ErrorKind, detail: str = None):
        self.kind = kind
        self.detail = detail
        msg = kind.description
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
