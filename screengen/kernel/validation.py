"""
Screengen Kernel — Layout Validation

Checks a tree before it reaches the resolver.
Returns a list of error strings. Empty list = valid.

Validation is structural (is the tree well-formed?). The resolver raises
on the same problems, but only on the first one it trips over; this walks
the whole tree and reports everything at once.
"""

from __future__ import annotations

import math

from screengen.kernel.profiles import DeviceProfile
from screengen.kernel.types import (
    Horizontal,
    ListWidget,
    Node,
    Split,
    Tile,
    Vertical,
    describe,
    is_separator,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_layout(root: Node, profile: DeviceProfile | None = None) -> list[str]:
    """
    Validate the tree under `root`.

    Checks:
    - Stacks have at least one child that is not a separator
    - Split shares are within [0, 1] and add up to 1
    - Lists have items and a positive visible_count
    - With a profile: explicit font sizes exist in its font table
    """
    errors: list[str] = []
    _validate(root, "root", profile, errors)
    return errors


# ---------------------------------------------------------------------------
# Per-node validators
# ---------------------------------------------------------------------------


def _validate(node: Node, path: str, profile: DeviceProfile | None, errors: list[str]) -> None:
    if isinstance(node, (Vertical, Horizontal)):
        kind = type(node).__name__
        if not node.nodes:
            errors.append(f"{path}: {kind} stack is empty")
        elif all(is_separator(child) for child in node.nodes):
            errors.append(f"{path}: {kind} stack contains only separators")

    elif isinstance(node, Split):
        for label, share in (("first", node.first_share), ("second", node.second_share)):
            if not 0.0 <= share <= 1.0:
                errors.append(f"{path}: Split {label} share {share} is outside [0, 1]")
        if not math.isclose(node.first_share + node.second_share, 1.0):
            errors.append(f"{path}: Split shares add up to {node.first_share + node.second_share}, expected 1.0")

    elif isinstance(node, ListWidget):
        if not node.items:
            errors.append(f"{path}: ListWidget has no items")
        if node.visible_count < 1:
            errors.append(f"{path}: ListWidget visible_count must be at least 1, got {node.visible_count}")

    if isinstance(node, Tile) and profile is not None:
        size = node.text.font_size
        if size is not None and not profile.font_table.has_size(size):
            errors.append(f"{path}: font size {size} is not available on {profile.name}")

    for idx, child in enumerate(node.children()):
        _validate(child, f"{path}/{idx}:{describe(child)}", profile, errors)
