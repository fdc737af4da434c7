"""
Screengen Resolver -- Degenerate Layout Tests

The resolver raises LayoutError on trees it cannot divide. validate_layout()
reports the same problems up front, all at once, without raising.
"""

import pytest

from screengen.kernel.builders import (
    horizontal,
    horizontal_separator,
    split,
    tile,
    vertical,
    vertical_separator,
    vlist,
)
from screengen.kernel.embedded_renderer import render_streams
from screengen.kernel.preview_renderer import render_preview
from screengen.kernel.profiles import get_profile
from screengen.kernel.resolver import resolve, resolve_in_place
from screengen.kernel.screens import SCREENS
from screengen.kernel.types import (
    LayoutError,
    ListWidget,
    Rect,
    RenderError,
    Split,
    Text,
    Tile,
    geometry,
    unresolved_nodes,
)
from screengen.kernel.validation import validate_layout

BOUNDS = Rect(0, 0, 296, 128)


# ============================================================================
# Resolver errors
# ============================================================================


class TestResolverErrors:
    def test_empty_stack(self, waveshare):
        with pytest.raises(LayoutError, match="Vertical stack has no children"):
            resolve(vertical([]), BOUNDS, waveshare)

    def test_stack_of_separators(self, waveshare):
        with pytest.raises(LayoutError, match="Horizontal stack"):
            resolve(horizontal([vertical_separator(), horizontal_separator()]), BOUNDS, waveshare)

    def test_list_without_visible_slots(self, waveshare):
        node = ListWidget(items=[Tile(text=Text(content="a"))], visible_count=0)
        with pytest.raises(LayoutError, match="visible_count"):
            resolve(node, BOUNDS, waveshare)

    def test_explicit_font_missing_from_profile(self, waveshare):
        with pytest.raises(LayoutError, match="font size 16, which waveshare_2in9 does not have"):
            resolve(vertical([tile("lap time").with_font_size(16)]), BOUNDS, waveshare)

    def test_explicit_list_font_missing_from_profile(self, sharp):
        with pytest.raises(LayoutError, match="sharp_mip_2in7"):
            resolve(vlist(["Running"]).with_font_size(19), BOUNDS, sharp)

    def test_separator_margin_wider_than_slot(self, waveshare):
        with pytest.raises(LayoutError, match="margin 13"):
            resolve(horizontal_separator(), Rect(0, 0, 20, 10), waveshare)

    def test_vertical_separator_margin_taller_than_slot(self, waveshare):
        with pytest.raises(LayoutError, match="VerticalSeparator"):
            resolve(vertical_separator(), Rect(0, 0, 20, 4), waveshare)

    def test_list_margin_wider_than_slot(self, waveshare):
        with pytest.raises(LayoutError, match="ListWidget item margin 1"):
            resolve(vlist(["Running"]), Rect(0, 0, 1, 30), waveshare)

    def test_list_margin_fills_slot_exactly(self, waveshare):
        layout = resolve(vlist(["Running"]), Rect(0, 0, 2, 30), waveshare)
        assert layout.items[0].rect == Rect(1, 0, 0, 30)


# ============================================================================
# Failed re-resolve
# ============================================================================


class TestFailedReResolve:
    def tree(self):
        return vertical([tile("A"), horizontal([tile("B"), horizontal_separator()])])

    def test_no_stale_geometry_survives(self, waveshare):
        tree = self.tree()
        resolve_in_place(tree, BOUNDS, waveshare)
        assert unresolved_nodes(tree) == []

        with pytest.raises(LayoutError):
            resolve_in_place(tree, Rect(0, 0, 20, 128), waveshare)

        separator = tree.nodes[1].nodes[1]
        assert separator.rect is None
        assert tree.nodes[0].rect == Rect(0, 0, 20, 64)

    def test_emitters_refuse_the_tree(self, waveshare):
        tree = self.tree()
        resolve_in_place(tree, BOUNDS, waveshare)
        with pytest.raises(LayoutError):
            resolve_in_place(tree, Rect(0, 0, 20, 128), waveshare)

        with pytest.raises(RenderError, match="HorizontalSeparator"):
            render_streams(tree)
        with pytest.raises(RenderError):
            render_preview(tree, BOUNDS, waveshare)

    def test_tree_resolves_again_afterwards(self, waveshare):
        tree = self.tree()
        with pytest.raises(LayoutError):
            resolve_in_place(tree, Rect(0, 0, 20, 128), waveshare)
        resolve_in_place(tree, BOUNDS, waveshare)
        assert geometry(tree) == geometry(resolve(self.tree(), BOUNDS, waveshare))


# ============================================================================
# validate_layout
# ============================================================================


class TestValidateLayout:
    def test_valid_tree(self, waveshare):
        tree = split(horizontal([tile("A"), vertical_separator(), tile("B")]), 0.2, vlist(["x", "y"]))
        assert validate_layout(tree, waveshare) == []

    def test_empty_root(self):
        assert validate_layout(vertical([])) == ["root: Vertical stack is empty"]

    def test_nested_path(self):
        errors = validate_layout(vertical([tile("A"), horizontal([horizontal_separator()])]))
        assert errors == ["root/1:Horizontal: Horizontal stack contains only separators"]

    def test_split_shares(self):
        errors = validate_layout(Split(first=tile("A"), first_share=0.7, second=tile("B"), second_share=0.7))
        assert len(errors) == 1
        assert "expected 1.0" in errors[0]

    def test_split_share_out_of_range(self):
        errors = validate_layout(Split(first=tile("A"), first_share=1.5, second=tile("B"), second_share=-0.5))
        assert any("first share 1.5 is outside [0, 1]" in e for e in errors)
        assert any("second share -0.5 is outside [0, 1]" in e for e in errors)

    def test_empty_list(self):
        errors = validate_layout(ListWidget())
        assert errors == [
            "root: ListWidget has no items",
            "root: ListWidget visible_count must be at least 1, got 0",
        ]

    def test_font_sizes_checked_only_with_profile(self, waveshare):
        tree = vertical([tile("A").with_font_size(16)])
        assert validate_layout(tree) == []
        assert validate_layout(tree, waveshare) == [
            "root/0:Tile('A'): font size 16 is not available on waveshare_2in9"
        ]

    def test_reports_every_problem(self, waveshare):
        tree = vertical([vertical([]), tile("A").with_font_size(16), vlist([])])
        assert len(validate_layout(tree, waveshare)) == 4


@pytest.mark.parametrize("name", list(SCREENS))
def test_catalogue_screens_are_valid_on_their_display(name):
    screen = SCREENS[name]
    assert validate_layout(screen.build(), get_profile(screen.profile_name)) == []
