"""

The ``tiler`` module is responsible for turning a usable screen area into a layout for arbitrary number of views.

``GeneratedLayout`` holds the name reported to the compositor and the ordered ``Rectangle`` list,
the i-th rectangle belongs to the i-th view

"""

from dataclasses import dataclass, field
from typing import List

from bsplayout.config import LayoutConfig
from bsplayout.errors import LayoutError

from .partition import Axis, Rectangle, split

LAYOUT_NAME = "bsp-layout"
# largest coordinate river-layout-v3 accepts (int32)
COORD_MAX = 2**31 - 1


@dataclass
class GeneratedLayout:
    """Rectangles generated for a single layout demand"""

    views: List[Rectangle] = field(default_factory=list)
    layout_name: str = LAYOUT_NAME

    def __len__(self) -> int:
        return len(self.views)


def generate_layout(
    config: LayoutConfig, view_count: int, usable_width: int, usable_height: int
) -> GeneratedLayout:
    """Generate the BSP layout for the usable area of an output

    :param config: the layout configuration
    :param view_count: total number of views
    :param usable_width: width of the usable area in pixels
    :param usable_height: height of the usable area in pixels
    :raises LayoutError: split percentages out of range, nothing left after outer gaps
        or views placed past COORD_MAX
    :rtype: GeneratedLayout
    """
    if not config.split_percs_valid():
        raise LayoutError(
            f"split percents must be > 0.0 and < 1.0, got vsplit={config.vsplit_perc} "
            f"hsplit={config.hsplit_perc}"
        )
    width = usable_width - config.og_left - config.og_right
    height = usable_height - config.og_top - config.og_bottom
    if width <= 0 or height <= 0:
        raise LayoutError(
            f"outer gaps leave no room on a {usable_width}x{usable_height} area"
        )
    axis = Axis.HORIZONTAL if config.start_hsplit else Axis.VERTICAL
    views = split(
        config, axis, config.og_left, config.og_top, width, height, view_count
    )
    if any(rect.right > COORD_MAX or rect.bottom > COORD_MAX for rect in views):
        raise LayoutError(f"gaps push views past the coordinate limit {COORD_MAX}")
    return GeneratedLayout(views=views)


if __name__ == "__main__":
    print("bsp")
    for n in range(1, 6):
        print(list(generate_layout(LayoutConfig(), n, 1920, 1080).views))
