"""DispatchService — the cat-purring demonstration.

Runs the runtime rule over all four ``(cat, owner)`` pairs and the
compile-time rule over the pairs it can express.
"""

from __future__ import annotations

import itertools

import structlog

from designdemos.domain.cats import (
    CAT_TYPES,
    OWNER_LABELS,
    UnrepresentablePairingError,
    accepted_pairings,
    pair,
    purr_runtime,
)
from designdemos.domain.types import CatVariant, DispatchResult, OwnerVariant, Strategy
from designdemos.services.base import BaseService
from designdemos.services.contracts import (
    PairingsData,
    PurrCompileTimeData,
    PurrRuntimeData,
    dump_validated,
)
from designdemos.services.result import ErrorCode, ServiceResult
from designdemos.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

RUNTIME_CAPTION = (
    "We have hissing in production because there are code paths to allow it.\n"
    "We have to test for all these cases and handle the error condition."
)
COMPILE_TIME_CAPTION = (
    "There is no hissing in production because not-purring is a compiler error."
)


def describe(cat: CatVariant, result: str, owner: OwnerVariant) -> str:
    """Sentence form, e.g. ``"Spoiled purr with Human"``."""
    return f"{CAT_TYPES[cat].name} {result} {OWNER_LABELS[owner]}"


class DispatchService(BaseService):
    """Runtime versus compile-time purr decisions."""

    @traced
    def runtime(self) -> ServiceResult:
        """Every pair under the runtime rule, defects included."""
        cases: list[dict[str, object]] = []
        with trace_span("purr_runtime"):
            for cat, owner in itertools.product(CatVariant, OwnerVariant):
                result = purr_runtime(cat, owner)
                cases.append(
                    {
                        "cat": str(cat),
                        "owner": str(owner),
                        "result": str(result),
                        "purred": result == DispatchResult.PURR,
                        "line": describe(cat, result, owner),
                    }
                )
        failures = sum(1 for c in cases if not c["purred"])
        log.debug("purr_runtime.complete", count=len(cases), failures=failures)
        warnings = [f"{failures} of {len(cases)} pairings did not purr"] if failures else []
        data = dump_validated(
            PurrRuntimeData,
            {
                "strategy": str(Strategy.RUNTIME),
                "caption": RUNTIME_CAPTION,
                "count": len(cases),
                "failures": failures,
                "cases": cases,
            },
        )
        return self._ok("purr_runtime", data, warnings=warnings)

    @traced
    def compile_time(
        self,
        cat: CatVariant = CatVariant.SPOILED_INDOOR,
        owner: OwnerVariant = OwnerVariant.HUMAN,
    ) -> ServiceResult:
        """Purr through a ``Pairing``; pairs that cannot be built are errors."""
        op = "purr_compile_time"
        try:
            pairing = pair(cat, owner)
        except UnrepresentablePairingError as exc:
            return self._fail(
                op,
                ErrorCode.UNREPRESENTABLE_PAIRING,
                str(exc),
                cat=str(cat),
                owner=str(owner),
            )

        result = pairing.purr()
        data = dump_validated(
            PurrCompileTimeData,
            {
                "strategy": str(Strategy.COMPILE_TIME),
                "caption": COMPILE_TIME_CAPTION,
                "cat": str(cat),
                "owner": str(owner),
                "result": str(result),
                "line": describe(cat, result, owner),
            },
        )
        return self._ok(op, data)

    @traced
    def pairs(self) -> ServiceResult:
        """Constructible pairs, plus the reason each other pair is rejected."""
        accepted = accepted_pairings()
        rejected: list[dict[str, str]] = []
        for cat, owner in itertools.product(CatVariant, OwnerVariant):
            if (cat, owner) in accepted:
                continue
            try:
                pair(cat, owner)
            except UnrepresentablePairingError as exc:
                rejected.append({"cat": str(cat), "owner": str(owner), "reason": str(exc)})
        data = dump_validated(
            PairingsData,
            {
                "count": len(accepted),
                "items": [{"cat": str(c), "owner": str(o)} for c, o in accepted],
                "rejected": rejected,
            },
        )
        return self._ok("purr_pairs", data)
