import pytest
from callflow.core.status import (
    CLIENT_ERROR_NOT_FOUND,
    REDIRECTION_NOT_MODIFIED,
    RFC_2616_BASE,
    SERVER_ERROR_INTERNAL,
    SUCCESS_OK,
    Status,
    StatusCategory,
)
from pydantic import ValidationError


@pytest.mark.parametrize(
    "code, category",
    [
        (100, StatusCategory.INFORMATIONAL),
        (200, StatusCategory.SUCCESS),
        (304, StatusCategory.REDIRECTION),
        (404, StatusCategory.CLIENT_ERROR),
        (503, StatusCategory.SERVER_ERROR),
        (799, StatusCategory.UNKNOWN),
    ],
)
def test_category_derived_from_code(code, category):
    assert Status(code=code).category == category


def test_predicates():
    assert SUCCESS_OK.is_success
    assert not SUCCESS_OK.is_error
    assert REDIRECTION_NOT_MODIFIED.is_redirection
    assert CLIENT_ERROR_NOT_FOUND.is_client_error
    assert CLIENT_ERROR_NOT_FOUND.is_error
    assert SERVER_ERROR_INTERNAL.is_server_error
    assert SERVER_ERROR_INTERNAL.is_error


def test_equality_is_by_code():
    bare = Status(code=404)
    assert bare == CLIENT_ERROR_NOT_FOUND
    assert bare.description is None
    assert hash(bare) == hash(CLIENT_ERROR_NOT_FOUND)
    assert Status(code=200, description="custom") == SUCCESS_OK
    assert SUCCESS_OK != REDIRECTION_NOT_MODIFIED
    assert SUCCESS_OK != 200


def test_value_of_returns_predefined_constant():
    assert Status.value_of(404) is CLIENT_ERROR_NOT_FOUND
    assert Status.value_of(500).description == SERVER_ERROR_INTERNAL.description


def test_value_of_unknown_code_returns_bare_status():
    status = Status.value_of(299)
    assert status.code == 299
    assert status.name is None
    assert status.description is None


@pytest.mark.parametrize("code", [0, 99, 1000, -1])
def test_code_out_of_range_is_rejected(code):
    with pytest.raises(ValidationError):
        Status(code=code)


def test_reference_uri_uses_explicit_uri():
    assert CLIENT_ERROR_NOT_FOUND.reference_uri == f"{RFC_2616_BASE}#sec10.4.5"
    assert Status(code=418, uri="https://example.com/teapot").reference_uri == "https://example.com/teapot"


def test_reference_uri_falls_back_to_category_section():
    assert Status(code=499).reference_uri == f"{RFC_2616_BASE}#sec10.4"
    assert Status(code=799).reference_uri == RFC_2616_BASE


def test_status_is_immutable():
    with pytest.raises(ValidationError):
        SUCCESS_OK.code = 201


def test_str():
    assert str(CLIENT_ERROR_NOT_FOUND) == "404 Not Found"
    assert str(Status(code=299)) == "299"
