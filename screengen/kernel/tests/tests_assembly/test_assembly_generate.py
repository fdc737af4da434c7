"""
Screengen Assembly -- Generate & Write Tests

Assembly is the only layer with IO. These tests write into tmp_path.

Covers:
  - generate() validates, resolves and renders both artifacts
  - Invalid layouts fail with every problem listed
  - generate_screen() targets the screen's own display by default
  - write_artifacts() writes <name>.60 and <name>.inc
"""

import logging

import pytest

from screengen.kernel.assembly import generate, generate_screen, write_artifacts
from screengen.kernel.builders import horizontal, tile, vertical, vertical_separator
from screengen.kernel.embedded_renderer import EmbeddedOptions
from screengen.kernel.screens import SCREENS, get_screen
from screengen.kernel.types import LayoutError, unresolved_nodes


def two_tiles():
    return horizontal([tile("A"), vertical_separator(), tile("B")])


# ============================================================================
# generate
# ============================================================================


class TestGenerate:
    def test_renders_both_artifacts(self, waveshare):
        generated = generate(two_tiles(), waveshare, name="pair")
        assert generated.name == "pair"
        assert generated.profile is waveshare
        assert generated.preview.startswith("MainWindow := Window {")
        assert "paint.DrawVerticalLine(148, 3, 122, COLORED);" in generated.embedded

    def test_layout_is_resolved_copy(self, waveshare):
        tree = two_tiles()
        generated = generate(tree, waveshare)
        assert unresolved_nodes(generated.layout) == []
        assert tree.nodes[0].rect is None

    def test_options_reach_embedded_renderer(self, waveshare):
        generated = generate(two_tiles(), waveshare, options=EmbeddedOptions(view_class="PairView"))
        assert "void PairView::drawStatic() {" in generated.embedded

    def test_invalid_layout_lists_every_problem(self, waveshare):
        tree = vertical([vertical([]), tile("A").with_font_size(16)])
        with pytest.raises(LayoutError) as exc:
            generate(tree, waveshare, name="broken")
        message = str(exc.value)
        assert message.startswith("Screen 'broken' is not valid for waveshare_2in9:")
        assert "root/0:Vertical: Vertical stack is empty" in message
        assert "font size 16 is not available on waveshare_2in9" in message


# ============================================================================
# generate_screen
# ============================================================================


@pytest.mark.parametrize("name", list(SCREENS))
def test_every_catalogue_screen_generates(name):
    generated = generate_screen(SCREENS[name])
    assert generated.name == name
    assert generated.profile.name == SCREENS[name].profile_name
    assert generated.preview.count("Rectangle {") >= 3
    assert "::drawStatic() {" in generated.embedded


class TestGenerateScreen:
    def test_profile_override(self, sharp):
        generated = generate_screen(get_screen("activity_splash"), sharp)
        assert generated.profile is sharp
        assert "width: 400phx;" in generated.preview

    def test_override_without_the_screen_fonts(self, sharp):
        with pytest.raises(LayoutError, match="font size 19 is not available on sharp_mip_2in7"):
            generate_screen(get_screen("select_activity"), sharp)


# ============================================================================
# write_artifacts
# ============================================================================


class TestWriteArtifacts:
    def test_writes_both_files(self, waveshare, tmp_path):
        generated = generate(two_tiles(), waveshare, name="pair")
        paths = write_artifacts(generated, tmp_path / "ui")

        assert [p.name for p in paths] == ["pair.60", "pair.inc"]
        assert paths[0].read_text(encoding="utf-8") == generated.preview
        assert paths[1].read_text(encoding="utf-8") == generated.embedded

    def test_creates_nested_directories(self, waveshare, tmp_path):
        target = tmp_path / "build" / "ui" / "screens"
        write_artifacts(generate(two_tiles(), waveshare), target)
        assert (target / "screen.60").is_file()

    def test_overwrites_previous_output(self, waveshare, tmp_path):
        (tmp_path / "pair.inc").write_text("stale", encoding="utf-8")
        write_artifacts(generate(two_tiles(), waveshare, name="pair"), tmp_path)
        assert "stale" not in (tmp_path / "pair.inc").read_text(encoding="utf-8")

    def test_logs_each_file(self, waveshare, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="screengen.kernel.assembly"):
            write_artifacts(generate(two_tiles(), waveshare, name="pair"), tmp_path)
        assert sum("Wrote" in record.message for record in caplog.records) == 2
