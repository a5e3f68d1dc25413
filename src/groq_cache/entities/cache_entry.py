"""Cache entry domain entity."""

from dataclasses import dataclass
from enum import StrEnum


class EntryStatus(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CacheEntryEntity:
    """Outcome of a completion, as cached and as returned to callers.

    Attributes:
        status: Whether the upstream call produced an answer
        content: The answer text, or an error description when status is ERROR
    """

    status: EntryStatus
    content: str

    @classmethod
    def success(cls, content: str) -> "CacheEntryEntity":
        return cls(status=EntryStatus.SUCCESS, content=content)

    @classmethod
    def error(cls, content: str) -> "CacheEntryEntity":
        return cls(status=EntryStatus.ERROR, content=content)

    @property
    def is_success(self) -> bool:
        return self.status is EntryStatus.SUCCESS
