"""Test bsplayout.config module"""

from bsplayout.config import LayoutConfig


def test_layout_config_defaults():
    """Test the default configuration"""
    config = LayoutConfig()
    assert (config.ig_left, config.ig_right, config.ig_top, config.ig_bottom) == (
        5,
        5,
        5,
        5,
    )
    assert (config.og_left, config.og_right, config.og_top, config.og_bottom) == (
        10,
        10,
        10,
        10,
    )
    assert (config.vsplit_perc, config.hsplit_perc) == (0.5, 0.5)
    assert not config.start_hsplit
    assert not config.reversed


def test_layout_config_set_all_gaps():
    """Test setting all gaps at once"""
    config = LayoutConfig()
    config.set_all_inner_gaps(3)
    config.set_all_outer_gaps(0)
    assert (config.ig_left, config.ig_right, config.ig_top, config.ig_bottom) == (
        3,
        3,
        3,
        3,
    )
    assert (config.og_left, config.og_right, config.og_top, config.og_bottom) == (
        0,
        0,
        0,
        0,
    )


def test_layout_config_split_percs_valid():
    """Test split percentages must be strictly between 0 and 1"""
    assert LayoutConfig().split_percs_valid()
    assert LayoutConfig(vsplit_perc=0.0001, hsplit_perc=0.9999).split_percs_valid()
    assert not LayoutConfig(vsplit_perc=0.0).split_percs_valid()
    assert not LayoutConfig(hsplit_perc=1.0).split_percs_valid()
