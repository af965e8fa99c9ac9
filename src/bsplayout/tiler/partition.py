"""

The ``partition`` module splits a physical area into view rectangles, to that end, it defines 2 basic types:

``Axis`` tells which way an area is being cut, ``HORIZONTAL`` cuts it into top/bottom halves
and ``VERTICAL`` cuts it into left/right halves

``Rectangle`` holds the physical position and size of a single view in pixels

"""

import enum
from dataclasses import dataclass
from typing import List

from bsplayout.config import LayoutConfig


class Axis(enum.Enum):
    """The direction of a split"""

    # top/bottom
    HORIZONTAL = "horizontal"
    # left/right
    VERTICAL = "vertical"

    @property
    def other(self) -> "Axis":
        """The axis used by the next level of recursion"""
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


@dataclass
class Rectangle:
    """Physical rectangle of a view, origin may be anywhere on the display"""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """Return the x coordinate right after the rectangle."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Return the y coordinate right below the rectangle."""
        return self.y + self.height

    def overlaps(self, other: "Rectangle") -> bool:
        """Return True if the two rectangles share any pixel."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def shrink(extent: int, gap: int) -> int:
    """Take the gap away from the extent, never going below 1 pixel"""
    return extent - gap if gap < extent else 1


def split(
    config: LayoutConfig,
    axis: Axis,
    origin_x: int,
    origin_y: int,
    width: int,
    height: int,
    view_count: int,
) -> List[Rectangle]:
    """Split the area into ``view_count`` rectangles recursively

    .. code-block:: text

        VERTICAL first, 5 views

        +-----------+-----------+
        |           |           |
        |     1     |     3     |
        |           |           |
        +-----------+-----+-----+
        |           |     |     |
        |     2     |  4  |  5  |
        |           |     |     |
        +-----------+-----+-----+

    The area is cut in two along ``axis``, the primary part receives the
    configured split percentage and half of the views (rounded down), the
    secondary part takes the rest. Both parts are then cut along the other axis
    until every part holds a single view.

    :param config: the layout configuration (gaps, split percentages, reversed)
    :param axis: how to cut the area at this level
    :param origin_x: left of the area in pixels
    :param origin_y: top of the area in pixels
    :param width: width of the area in pixels
    :param height: height of the area in pixels
    :param view_count: total number of views to be placed in the area
    :returns: primary rectangles followed by secondary rectangles
    :rtype: List[Rectangle]
    """
    if view_count <= 0:
        return []
    if view_count == 1:
        return [Rectangle(origin_x, origin_y, width, height)]

    half_view_count = view_count // 2
    # secondary part absorbs the odd view
    views_remaining = view_count % 2

    if axis is Axis.HORIZONTAL:
        extent, perc = height, config.hsplit_perc
        leading_gap, trailing_gap = config.ig_top, config.ig_bottom
    else:
        extent, perc = width, config.vsplit_perc
        leading_gap, trailing_gap = config.ig_left, config.ig_right

    prime_split = int(extent * perc)
    if prime_split == 0:
        prime_split = 1
    if prime_split >= extent:
        prime_split = extent - 1
    sec_split = extent - prime_split

    if not config.reversed:
        prime_gap, sec_gap = trailing_gap, leading_gap
        prime_offset, sec_offset = 0, prime_split + sec_gap
    else:
        prime_gap, sec_gap = leading_gap, trailing_gap
        prime_offset, sec_offset = sec_split + prime_gap, 0

    prime_extent = shrink(prime_split, prime_gap)
    sec_extent = shrink(sec_split, sec_gap)

    if axis is Axis.HORIZONTAL:
        prime = (origin_x, origin_y + prime_offset, width, prime_extent)
        sec = (origin_x, origin_y + sec_offset, width, sec_extent)
    else:
        prime = (origin_x + prime_offset, origin_y, prime_extent, height)
        sec = (origin_x + sec_offset, origin_y, sec_extent, height)

    return split(config, axis.other, *prime, half_view_count) + split(
        config, axis.other, *sec, half_view_count + views_remaining
    )
