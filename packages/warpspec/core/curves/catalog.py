"""Spec catalog: default specs layered with application presets.

The default table stays untouched; a catalog builds its own read-only view
at construction time.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from warpspec.core.curves.defaults import DEFAULT_SPECS, UnknownDefaultNameError
from warpspec.core.curves.models import WarpSpec

if TYPE_CHECKING:
    from warpspec.core.config.models import WarpConfig

logger = logging.getLogger(__name__)


class SpecCatalog:
    """Read-only lookup of named warp specs.

    Example:
        >>> catalog = SpecCatalog({"cutoff": WarpSpec.create(100, 8000, "exp")})
        >>> catalog.get("cutoff").describe()
        'exp [100, 8000]'
        >>> "freq" in catalog
        True
    """

    def __init__(
        self,
        presets: Mapping[str, WarpSpec] | None = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        """Build the catalog.

        Args:
            presets: Named specs to add. A preset may replace a default.
            include_defaults: Start from the default table when True.
        """
        items: dict[str, WarpSpec] = dict(DEFAULT_SPECS) if include_defaults else {}

        for name, spec in (presets or {}).items():
            if name in items:
                logger.info(f"Preset {name!r} overrides default spec {items[name].describe()}")
            items[name] = spec

        self._items: Mapping[str, WarpSpec] = MappingProxyType(items)
        logger.debug(f"Spec catalog built with {len(items)} specs")

    @classmethod
    def from_config(cls, config: WarpConfig) -> SpecCatalog:
        """Build a catalog from the presets declared in a WarpConfig."""
        presets = {name: preset.to_spec() for name, preset in config.presets.items()}
        return cls(presets, include_defaults=config.include_defaults)

    def get(self, name: str) -> WarpSpec:
        """Lookup spec by name.

        Raises:
            UnknownDefaultNameError: If no spec has this name.
        """
        try:
            return self._items[name]
        except KeyError:
            raise UnknownDefaultNameError(name) from None

    def has(self, name: str) -> bool:
        """Check if a spec exists."""
        return name in self._items

    def names(self) -> list[str]:
        """List all spec names, sorted."""
        return sorted(self._items)

    def items(self) -> list[tuple[str, WarpSpec]]:
        """List (name, spec) pairs sorted by name."""
        return sorted(self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
