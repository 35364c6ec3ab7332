"""
Tests for loading the terrain palette from YAML.
"""
import pytest

from skirmish.core.data import TERRAIN_DATA
from skirmish.core.palette_loader import PaletteLoader, TerrainPalette, get_terrain_palette


class TestTerrainPalette:

    def test_glyph_lookup(self):
        palette = TerrainPalette({"terrain": {"Lava": {"symbol": "%"}, "Sand": {"symbol": ":"}}})
        assert palette.get_terrain("%").name == "Lava"
        assert palette.get_terrain_by_name("Sand").symbol == ":"
        assert palette.get_terrain("x") is None

    def test_default_falls_back_to_first(self):
        palette = TerrainPalette({"terrain": {"Lava": {"symbol": "%"}, "Sand": {"symbol": ":"}}})
        assert palette.default.name == "Lava"
        named = TerrainPalette({"default": "Sand", "terrain": {"Lava": {"symbol": "%"}, "Sand": {"symbol": ":"}}})
        assert named.default.name == "Sand"

    def test_symbols_must_be_single_characters(self):
        with pytest.raises(ValueError):
            TerrainPalette({"terrain": {"Lava": {"symbol": "%%"}}})

    def test_symbols_must_be_unique(self):
        with pytest.raises(ValueError):
            TerrainPalette({"terrain": {"Lava": {"symbol": "%"}, "Fire": {"symbol": "%"}}})

    @pytest.mark.parametrize("config", [
        {"terrain": {"Grass": None}},
        {"terrain": {}},
        {},
    ])
    def test_empty_or_null_terrain_rejected(self, config):
        with pytest.raises(ValueError):
            TerrainPalette(config)


class TestPaletteLoader:

    def test_missing_file_uses_builtin_palette(self, palette):
        for name, terrain in TERRAIN_DATA.items():
            assert palette.get_terrain(terrain.symbol).name == name
        assert palette.default.name == "Grass"

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "terrain.yaml"
        path.write_text("default: Sand\nterrain:\n  Sand:\n    symbol: ':'\n", encoding="utf-8")
        palette = PaletteLoader(str(path)).load_palette()
        assert palette.default.name == "Sand"
        assert palette.get_terrain(":").name == "Sand"

    def test_caches_until_forced(self, tmp_path):
        path = tmp_path / "terrain.yaml"
        path.write_text("terrain:\n  Sand:\n    symbol: ':'\n", encoding="utf-8")
        loader = PaletteLoader(str(path))
        first = loader.load_palette()
        assert loader.load_palette() is first
        assert loader.load_palette(force_reload=True) is not first

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "terrain.yaml"
        path.write_text("terrain: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError):
            PaletteLoader(str(path)).load_palette()

    @pytest.mark.parametrize("text", ["terrain:\n  Grass:\n", "- Grass\n", ""])
    def test_unusable_palette_file(self, tmp_path, text):
        path = tmp_path / "terrain.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ValueError):
            PaletteLoader(str(path)).load_palette()

    def test_shipped_palette_matches_builtin_terrain(self):
        palette = get_terrain_palette()
        for name, terrain in TERRAIN_DATA.items():
            assert palette.get_terrain_by_name(name).symbol == terrain.symbol
