"""Tests for domain error translation."""

import pytest

from jobreport.api.errors import to_http
from jobreport.domain.exceptions import BadRequestError, DomainError, NotFoundError


@pytest.mark.parametrize(
    "exc, status_code",
    [
        (NotFoundError("Unable to find record on job id: x"), 404),
        (BadRequestError("No job id provided."), 400),
        (DomainError("unexpected"), 400),
    ],
)
def test_to_http(exc, status_code):
    http_exc = to_http(exc)
    assert http_exc.status_code == status_code
    assert http_exc.detail == exc.message


def test_handler_returns_json_detail(client):
    response = client.get("/rest/job")
    assert response.status_code == 400
    assert response.json() == {"detail": "No job id provided."}
