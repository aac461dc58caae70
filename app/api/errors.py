from typing import TypeVar

from fastapi import HTTPException, status

from app.services.results import ServiceError, ServiceResult

T = TypeVar("T")

ERROR_STATUS_CODES = {
    ServiceError.missing_filters: status.HTTP_400_BAD_REQUEST,
    ServiceError.stage_not_found: status.HTTP_404_NOT_FOUND,
    ServiceError.invalid_stage: status.HTTP_404_NOT_FOUND,
    ServiceError.season_not_found: status.HTTP_404_NOT_FOUND,
    ServiceError.participant_not_found: status.HTTP_404_NOT_FOUND,
    ServiceError.unrecognized_competition_stage: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ServiceError.database_error: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap_result(result: ServiceResult[T], lang: str = "en") -> T:
    """Return the payload of a successful result or raise the matching HTTP error."""
    if result.success:
        return result.data

    status_code = ERROR_STATUS_CODES.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(status_code=status_code, detail=result.message(lang))
