"""Utilities for translating domain errors to HTTP responses."""

from fastapi import HTTPException, status

from jobreport.domain.exceptions import DomainError, NotFoundError


def to_http(exc: DomainError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
