"""Return types shared by every formrules service method.

A failed validation is a normal :class:`ServiceResult` with ``ok=False``;
services do not raise for bad user input. The CLI renders these objects
as text or dumps them as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Codes used by the validation service: ``VALIDATION_FAILED``,
    ``UNKNOWN_FORM``, ``UNKNOWN_KIND``, ``INVALID_INPUT``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: True when the call succeeded and ``error`` is None.
        op: Operation name, e.g. ``"check_form"``.
        data: Payload of a successful call.
        warnings: Problems worth reporting that did not fail the call.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any] | None = None, **kwargs: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, **kwargs)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
