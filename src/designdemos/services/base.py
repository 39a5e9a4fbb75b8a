"""BaseService — shared foundation for designdemos services.

Every service receives the resolved :class:`DemoSettings` at construction
time and builds its results through the helpers below so success and
failure payloads stay uniform.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from designdemos.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from designdemos.config.settings import DemoSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GaugeService(BaseService):
            def render(self, ...) -> ServiceResult:
                ...
                return self._ok("gauge_render", payload)
    """

    def __init__(self, settings: DemoSettings) -> None:
        self._settings = settings

    @staticmethod
    def _ok(
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])

    @staticmethod
    def _fail(op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
