"""Plugin loading for extra gauge styles.

Plugins come from the ``designdemos.plugins`` entry-point group and from
single-file modules in the local plugin directory.  Each plugin answers
``register_gauge_styles`` with a ``{name: builder}`` mapping that is merged
into :data:`designdemos.domain.gauges.GAUGE_REGISTRY`.  A plugin that fails
to import, construct, or answer is logged and skipped.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pluggy

from designdemos.plugins.hookspecs import DesignDemosHookSpec

PROJECT_NAME = "designdemos"
ENTRY_POINT_GROUP = "designdemos.plugins"
STYLE_HOOK = "register_gauge_styles"
LOCAL_MODULE_PREFIX = "designdemos_local_plugin_"

logger = logging.getLogger(__name__)


def _provides_styles(obj: object) -> bool:
    """Whether *obj* (class or instance) implements the gauge style hook."""
    hook = getattr(obj, STYLE_HOOK, None)
    return callable(hook) and getattr(hook, f"{PROJECT_NAME}_impl", None) is not None


def _style_classes(module: ModuleType) -> Iterator[type]:
    """Plugin classes defined (not imported) in *module*."""
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__ and _provides_styles(obj):
            yield obj


class PluginManager:
    """Discovers plugins and feeds their gauge styles into the registry.

    ``styles`` maps every style a plugin added to the name of that plugin.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(DesignDemosHookSpec)
        self._styles: dict[str, str] = {}
        self._loaded = False

    @property
    def styles(self) -> dict[str, str]:
        return dict(self._styles)

    def discover_and_load(self, *, local_dir: Path | None = None) -> dict[str, str]:
        """Load entry-point and local plugins, then register their styles.

        Returns the style-to-plugin mapping.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_points()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local(path)
        for plugin in self._pm.get_plugins():
            self._collect_styles(plugin)
        self._loaded = True
        return self.styles

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance; its styles apply at once if already loaded."""
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Registered plugin: %s", plugin_name)
        if self._loaded:
            self._collect_styles(plugin)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _instantiate_entry_points(self) -> None:
        """Swap entry-point classes for instances so the hook gets a bound ``self``."""
        for plugin in self._pm.get_plugins():
            if not (inspect.isclass(plugin) and _provides_styles(plugin)):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            instance = self._construct(plugin, plugin_name)
            if instance is not None:
                self._pm.register(instance, name=plugin_name)

    def _load_local(self, path: Path) -> None:
        module_name = f"{LOCAL_MODULE_PREFIX}{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            logger.warning("Could not create module spec for %s", path)
            return
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            logger.warning("Failed to load local plugin %s", path, exc_info=True)
            return

        for cls in _style_classes(module):
            instance = self._construct(cls, module_name)
            if instance is not None:
                self.register_plugin(instance, name=module_name)

    @staticmethod
    def _construct(cls: type, plugin_name: str) -> object | None:
        try:
            return cls()
        except Exception:
            logger.warning("Failed to instantiate plugin %s", plugin_name, exc_info=True)
            return None

    # ------------------------------------------------------------------
    # Style registration
    # ------------------------------------------------------------------

    def _collect_styles(self, plugin: object) -> None:
        """Register every style *plugin* offers; rejected styles are skipped."""
        from designdemos.domain.gauges import register_gauge_style

        if not _provides_styles(plugin):
            return
        plugin_name = self._pm.get_name(plugin) or type(plugin).__name__
        try:
            offered = getattr(plugin, STYLE_HOOK)()
        except Exception:
            logger.warning(
                "Failed to collect gauge styles from plugin %s", plugin_name, exc_info=True
            )
            return

        if offered is None:
            return
        if not isinstance(offered, dict):
            logger.warning("Plugin %s returned non-dict gauge style registrations", plugin_name)
            return

        for style, builder in offered.items():
            try:
                register_gauge_style(style, builder)
            except (AttributeError, TypeError, ValueError):
                logger.warning(
                    "Skipping gauge style %r from plugin %s", style, plugin_name, exc_info=True
                )
                continue
            self._styles[style.strip()] = plugin_name
