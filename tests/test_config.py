from pathlib import Path

from hypothesis import given, strategies as st

from atlas_unpacker.config import Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.output_dir == Path("output")
        assert settings.image_format == "png"
        assert settings.marker_color == "black"
        assert settings.page_mode == "RGBA"
        assert settings.write_manifest is False

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        custom_dir = Path("/custom/output")
        settings = Settings(
            output_dir=custom_dir,
            marker_color="#202020",
        )
        assert settings.output_dir == custom_dir
        assert settings.marker_color == "#202020"

    def test_nine_patch_border_is_not_configurable(self):
        """The nine-patch border width is fixed, so Settings offers no knob for it."""
        assert "ninepatch_padding" not in Settings.__dataclass_fields__

    @given(color=st.sampled_from(["black", "white", "#ff0000", "#00ff0080"]))
    def test_marker_color_is_kept(self, color):
        """For any Pillow color string, Settings stores it unchanged."""
        assert Settings(marker_color=color).marker_color == color
