"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from pkgdoc.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="discover")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="discover")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_dump(self) -> None:
        result = ServiceResult(
            ok=False,
            op="show",
            error=ServiceError(code="NOT_FOUND", message="Package not found: X", detail={"id": "X"}),
        )
        payload = json.loads(result.model_dump_json())
        assert payload["error"] == {
            "code": "NOT_FOUND",
            "message": "Package not found: X",
            "detail": {"id": "X"},
        }
