"""This module contains the configuration dataclass for the layout generator"""

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """LayoutConfig holds the gaps, split percentages and modes used to partition
    the screen. One instance lives as long as the layout session and is only
    changed by layout commands.
    """

    # gap between the inner edges of adjacent windows
    ig_left: int = 5
    ig_right: int = 5
    ig_top: int = 5
    ig_bottom: int = 5
    # gap between windows and the screen edge
    og_left: int = 10
    og_right: int = 10
    og_top: int = 10
    og_bottom: int = 10
    # share (0.0~1.0, exclusive) of the area given to the primary part of a left/right split
    vsplit_perc: float = 0.5
    # share (0.0~1.0, exclusive) of the area given to the primary part of a top/bottom split
    hsplit_perc: float = 0.5
    # first split divides top/bottom instead of left/right
    start_hsplit: bool = False
    # primary part goes to the right/bottom, views are laid out from the other end
    reversed: bool = False

    def set_all_inner_gaps(self, gap: int):
        """Set the gap on all inner edges"""
        self.ig_left = gap
        self.ig_right = gap
        self.ig_top = gap
        self.ig_bottom = gap

    def set_all_outer_gaps(self, gap: int):
        """Set the gap on all outer edges"""
        self.og_left = gap
        self.og_right = gap
        self.og_top = gap
        self.og_bottom = gap

    def split_percs_valid(self) -> bool:
        """Check if both split percentages are strictly between 0 and 1"""
        return 0.0 < self.vsplit_perc < 1.0 and 0.0 < self.hsplit_perc < 1.0
