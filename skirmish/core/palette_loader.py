"""Terrain palette loader for data-driven maps.

This module loads the glyph -> terrain mapping used by text maps from a YAML
file, so new terrain kinds can be declared without touching engine code.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .data.game_info import TERRAIN_DATA, TerrainKind


class TerrainPalette:
    """Container for the glyph -> TerrainKind mapping."""

    def __init__(self, config_data: dict[str, Any]):
        self.terrains: dict[str, TerrainKind] = {}
        self.glyphs: dict[str, TerrainKind] = {}

        for name, data in (config_data.get("terrain") or {}).items():
            if not isinstance(data, dict):
                raise ValueError(f"Terrain '{name}' must be a mapping with a symbol, got {data!r}")
            symbol = str(data.get("symbol", "?"))
            if len(symbol) != 1:
                raise ValueError(f"Terrain '{name}' symbol must be one character, got {symbol!r}")
            if symbol in self.glyphs:
                raise ValueError(
                    f"Terrain '{name}' reuses symbol {symbol!r} of '{self.glyphs[symbol].name}'"
                )
            terrain = TerrainKind(name, symbol)
            self.terrains[name] = terrain
            self.glyphs[symbol] = terrain
        if not self.terrains:
            raise ValueError("Terrain palette declares no terrain")

        self.default_name: Optional[str] = config_data.get("default")

    def get_terrain(self, glyph: str) -> Optional[TerrainKind]:
        """Get the terrain kind drawn with ``glyph``."""
        return self.glyphs.get(glyph)

    def get_terrain_by_name(self, name: str) -> Optional[TerrainKind]:
        return self.terrains.get(name)

    @property
    def default(self) -> TerrainKind:
        """Terrain used to fill boards built without a map."""
        if self.default_name and self.default_name in self.terrains:
            return self.terrains[self.default_name]
        return next(iter(self.terrains.values()))


class PaletteLoader:
    """Loader for terrain palette files with caching and fallbacks."""

    def __init__(self, palette_path: Optional[str] = None):
        self.palette_path = palette_path or self._find_default_palette_path()
        self._cached_palette: Optional[TerrainPalette] = None

    def _find_default_palette_path(self) -> str:
        """Find assets/terrain.yaml by walking up from this file."""
        current_dir = Path(__file__).parent
        for _ in range(4):
            palette_path = current_dir / "assets" / "terrain.yaml"
            if palette_path.exists():
                return str(palette_path)
            current_dir = current_dir.parent

        return "assets/terrain.yaml"

    def load_palette(self, force_reload: bool = False) -> TerrainPalette:
        """Load the palette, using the cache if available.

        A missing file falls back to the built-in palette; a malformed one
        raises ValueError.
        """
        if self._cached_palette is not None and not force_reload:
            return self._cached_palette

        if os.path.exists(self.palette_path):
            try:
                with open(self.palette_path, "r", encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse terrain palette {self.palette_path}: {e}") from e
            if not isinstance(config_data, dict):
                raise ValueError(f"Terrain palette {self.palette_path} must contain a mapping")
            self._cached_palette = TerrainPalette(config_data)
        else:
            self._cached_palette = self._create_fallback_palette()

        return self._cached_palette

    def _create_fallback_palette(self) -> TerrainPalette:
        """Build a palette from the built-in terrain table."""
        fallback_data = {
            "default": "Grass",
            "terrain": {
                name: {"symbol": terrain.symbol}
                for name, terrain in TERRAIN_DATA.items()
            },
        }
        return TerrainPalette(fallback_data)


# Global loader instance for easy access
_default_loader = PaletteLoader()


def get_terrain_palette(force_reload: bool = False) -> TerrainPalette:
    """Get the default terrain palette."""
    return _default_loader.load_palette(force_reload)
