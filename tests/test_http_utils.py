import json
from http import HTTPStatus

import pytest

from filmorate_api.api.http_utils import (
    ERRMAP,
    error_response,
    handle_domain_errors,
)
from filmorate_api.core.exceptions import NotFoundError, ValidationError


def test_error_response_has_error_body():
    resp = error_response(HTTPStatus.BAD_REQUEST, "x")
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert json.loads(resp.body) == {"error": "x"}


async def test_handle_domain_errors_maps_not_found():
    @handle_domain_errors(ERRMAP)
    async def fn():
        raise NotFoundError("film with id=1 not found")
    resp = await fn()
    assert resp.status_code == HTTPStatus.NOT_FOUND
    assert json.loads(resp.body) == {"error": "film with id=1 not found"}


async def test_handle_domain_errors_maps_validation():
    @handle_domain_errors(ERRMAP)
    async def fn():
        raise ValidationError("boom")
    resp = await fn()
    assert resp.status_code == HTTPStatus.BAD_REQUEST


async def test_handle_domain_errors_unmapped_domain_error_propagates():
    @handle_domain_errors({NotFoundError: HTTPStatus.NOT_FOUND})
    async def fn():
        raise ValidationError("not mapped")
    with pytest.raises(ValidationError):
        await fn()


async def test_handle_domain_errors_leaves_other_errors_alone():
    @handle_domain_errors(ERRMAP)
    async def fn():
        raise RuntimeError("defect")
    with pytest.raises(RuntimeError):
        await fn()


async def test_handle_domain_errors_happy_path_returns_value():
    @handle_domain_errors(ERRMAP)
    async def ok():
        return "ok"
    assert await ok() == "ok"
