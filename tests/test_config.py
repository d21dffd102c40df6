"""Tests for settings and layout options."""
from flowcanvas.config import LayoutOptions, Settings


class TestSettings:
    """Environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FLOWCANVAS_NODE_SPACING", raising=False)
        settings = Settings(_env_file=None)

        assert settings.node_spacing == 280
        assert settings.layer_spacing == 180
        assert settings.row_bucket_size == 50
        assert settings.log_json is True

    def test_environment_overrides(self, monkeypatch):
        """Variables use the FLOWCANVAS_ prefix."""
        monkeypatch.setenv("FLOWCANVAS_NODE_SPACING", "300")
        monkeypatch.setenv("FLOWCANVAS_LOG_JSON", "false")

        settings = Settings(_env_file=None)

        assert settings.node_spacing == 300
        assert settings.log_json is False

    def test_layout_options_mirror_settings(self):
        settings = Settings(_env_file=None, base_y=0, center_x=900, fallback_columns=4)
        options = settings.layout_options()

        assert isinstance(options, LayoutOptions)
        assert options.base_y == 0
        assert options.center_x == 900
        assert options.fallback_columns == 4
        assert options.node_spacing == settings.node_spacing
