"""Success/failure envelope returned by the standings services."""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.utils.error_messages import get_error_message

T = TypeVar("T")


class ServiceError(str, enum.Enum):
    missing_filters = "missing_filters"
    stage_not_found = "stage_not_found"
    invalid_stage = "invalid_stage"
    unrecognized_competition_stage = "unrecognized_competition_stage"
    season_not_found = "season_not_found"
    participant_not_found = "participant_not_found"
    database_error = "database_error"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    success: bool
    data: T | None = None
    error: ServiceError | None = None
    detail: str | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ServiceError, detail: str | None = None) -> "ServiceResult[T]":
        return cls(success=False, error=error, detail=detail)

    def message(self, lang: str = "en") -> str | None:
        if self.error is None:
            return None
        return get_error_message(self.error.value, lang)
