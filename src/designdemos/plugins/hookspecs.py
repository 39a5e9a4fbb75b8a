"""Pluggy hook specifications for designdemos extensions.

One setup-time hook lets plugins add gauge styles to the registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from designdemos.domain.gauges import GaugeBuilder

hookspec = pluggy.HookspecMarker("designdemos")
hookimpl = pluggy.HookimplMarker("designdemos")


class DesignDemosHookSpec:
    """Hook specifications for the designdemos plugin system."""

    @hookspec
    def register_gauge_styles(self) -> dict[str, GaugeBuilder] | None:
        """Return style name -> builder mappings to extend GAUGE_REGISTRY."""
