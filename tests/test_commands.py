"""Test bsplayout.commands module"""

import pytest

from bsplayout.commands import (
    GAP_MAX,
    SPLIT_PERC_MAX,
    SPLIT_PERC_MIN,
    LayoutCommand,
    apply_command,
    parse_command,
)
from bsplayout.config import LayoutConfig
from bsplayout.errors import ConfigError


def run(config: LayoutConfig, text: str):
    """Parse and apply a command string"""
    apply_command(config, parse_command(text))


def outer_gaps(config: LayoutConfig):
    return (config.og_top, config.og_left, config.og_right, config.og_bottom)


def inner_gaps(config: LayoutConfig):
    return (config.ig_top, config.ig_left, config.ig_right, config.ig_bottom)


def test_parse_command():
    """Test parsing a command string into a LayoutCommand"""
    cmd = parse_command("--ig-left 3 --outer-gap 7 --split-perc 0.4 --reverse")
    assert cmd == LayoutCommand(
        ig_left=3, default_outer_gap=7, default_split_perc=0.4, reverse=True
    )


def test_parse_command_without_dashes():
    """Test keywords may be written without leading dashes"""
    assert parse_command("inc-vsplit 0.1 start-hsplit") == parse_command(
        "--inc-vsplit 0.1 --start-hsplit"
    )


def test_parse_command_short_flags():
    """Test short flags"""
    cmd = parse_command(["-i", "1", "-o", "2", "-H", "0.3", "-v", "0.6", "-T", "4"])
    assert cmd.default_inner_gap == 1
    assert cmd.default_outer_gap == 2
    assert cmd.hsplit_perc == 0.3
    assert cmd.vsplit_perc == 0.6
    assert cmd.og_top == 4


def test_parse_command_empty():
    """Test an empty command has no effect"""
    config = LayoutConfig()
    run(config, "")
    assert config == LayoutConfig()


@pytest.mark.parametrize(
    "text",
    [
        "--bogus 1",
        "bogus",
        "--ig-left",
        "--ig-left abc",
        "--split-perc half",
        "--inner",
        "--reverse 1",
    ],
)
def test_parse_command_invalid(text):
    """Test unknown keywords and malformed arguments"""
    with pytest.raises(ConfigError):
        parse_command(text)


def test_handle_outer_gaps():
    """Test setting outer gaps"""
    config = LayoutConfig()
    config.set_all_outer_gaps(0)
    run(config, "--outer-gap 5")
    assert outer_gaps(config) == (5, 5, 5, 5)
    run(config, "--og-top 10")
    assert outer_gaps(config) == (10, 5, 5, 5)
    run(config, "--og-left 10")
    assert outer_gaps(config) == (10, 10, 5, 5)
    run(config, "--og-right 10")
    assert outer_gaps(config) == (10, 10, 10, 5)
    run(config, "--og-bottom 10")
    assert outer_gaps(config) == (10, 10, 10, 10)
    run(config, "--og-top 0 --og-left 1 --og-right 2 --og-bottom 3")
    assert outer_gaps(config) == (0, 1, 2, 3)


def test_handle_inner_gaps():
    """Test setting inner gaps, per edge gaps override the default one"""
    config = LayoutConfig()
    run(config, "--inner-gap 0")
    assert inner_gaps(config) == (0, 0, 0, 0)
    run(config, "--ig-top 1 --ig-left 2 --ig-right 3 --ig-bottom 4")
    assert inner_gaps(config) == (1, 2, 3, 4)
    run(config, "--ig-left 9 --inner-gap 6")
    assert inner_gaps(config) == (6, 9, 6, 6)


def test_handle_start_split():
    """Test choosing the first split"""
    config = LayoutConfig()
    run(config, "--start-hsplit")
    assert config.start_hsplit
    run(config, "--start-vsplit")
    assert not config.start_hsplit
    with pytest.raises(ConfigError):
        run(config, "--start-vsplit --start-hsplit")
    assert not config.start_hsplit


def test_handle_set_split():
    """Test setting split percentages"""
    config = LayoutConfig()
    run(config, "--split-perc 0.6")
    assert (config.vsplit_perc, config.hsplit_perc) == (0.6, 0.6)
    run(config, "--vsplit-perc 0.4")
    assert (config.vsplit_perc, config.hsplit_perc) == (0.4, 0.6)
    run(config, "--hsplit-perc 0.3")
    assert (config.vsplit_perc, config.hsplit_perc) == (0.4, 0.3)
    run(config, "--split-perc 0.5 --hsplit-perc 0.2 --vsplit-perc 0.1")
    assert (config.vsplit_perc, config.hsplit_perc) == (0.1, 0.2)


@pytest.mark.parametrize("value", ["0", "1", "0.0", "1.0", "-0.5", "1.5", "nan"])
def test_handle_set_split_out_of_range(value):
    """Test split percentages must be strictly between 0 and 1"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        run(config, f"--vsplit-perc {value}")
    assert config == LayoutConfig()


def test_handle_change_split():
    """Test increasing and decreasing split percentages"""
    config = LayoutConfig()
    run(config, "--inc-vsplit 0.3")
    assert config.vsplit_perc == pytest.approx(0.8)
    run(config, "--dec-vsplit 0.3")
    assert config.vsplit_perc == pytest.approx(0.5)
    run(config, "--inc-hsplit 0.3")
    assert config.hsplit_perc == pytest.approx(0.8)
    run(config, "--dec-hsplit 0.3")
    assert config.hsplit_perc == pytest.approx(0.5)
    run(config, "--inc-hsplit 0.3 --inc-vsplit 0.3")
    assert (config.hsplit_perc, config.vsplit_perc) == pytest.approx((0.8, 0.8))


def test_handle_change_split_clamped():
    """Test split percentages never reach 0 or 1"""
    config = LayoutConfig()
    run(config, "inc-vsplit 0.9")
    assert config.vsplit_perc == SPLIT_PERC_MAX == 0.9999
    config.vsplit_perc = 0.5
    run(config, "dec-vsplit 0.9")
    assert config.vsplit_perc == SPLIT_PERC_MIN == 0.0001
    run(config, "inc-hsplit 0.5")
    assert config.hsplit_perc == SPLIT_PERC_MAX
    run(config, "dec-hsplit 1")
    assert config.hsplit_perc == SPLIT_PERC_MIN


@pytest.mark.parametrize("value", ["0", "-0.1", "inf"])
def test_handle_change_split_invalid_delta(value):
    """Test deltas must be positive"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        run(config, f"--inc-vsplit {value}")
    assert config == LayoutConfig()


def test_handle_reverse():
    """Test toggling the reversed mode"""
    config = LayoutConfig()
    run(config, "--reverse")
    assert config.reversed
    run(config, "reverse")
    assert not config.reversed


@pytest.mark.parametrize(
    "text",
    [
        "--outer-gap 3 --ig-left -1",
        "--inner-gap 2 --split-perc 1.5",
        "--reverse --start-hsplit --start-vsplit",
        "--og-top 4 --dec-hsplit 0",
        "--og-top 4 --bogus",
    ],
)
def test_apply_command_atomic(text):
    """Test a failed command leaves the configuration untouched"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        run(config, text)
    assert config == LayoutConfig()


def test_apply_command_typed_validation():
    """Test commands built without the parser are validated too"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        apply_command(config, LayoutCommand(og_left=-3, reverse=True))
    assert config == LayoutConfig()


@pytest.mark.parametrize(
    "text", ["ig-left 2147483648", "--outer-gap 99999999999", "-T 4294967296"]
)
def test_handle_gap_too_large(text):
    """Test gaps must fit the int32 coordinates river accepts"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        run(config, text)
    assert config == LayoutConfig()


def test_handle_gap_limit():
    """Test the largest accepted gap"""
    config = LayoutConfig()
    run(config, f"ig-left {GAP_MAX}")
    assert config.ig_left == GAP_MAX == 2**31 - 1


@pytest.mark.parametrize(
    "cmd",
    [
        LayoutCommand(ig_left="3"),
        LayoutCommand(default_outer_gap=2.5),
        LayoutCommand(og_top=True),
        LayoutCommand(vsplit_perc="0.5"),
        LayoutCommand(dec_vsplit="0.1"),
        LayoutCommand(default_split_perc=False),
    ],
)
def test_apply_command_wrong_types(cmd):
    """Test values of the wrong type are rejected as invalid commands"""
    config = LayoutConfig()
    with pytest.raises(ConfigError):
        apply_command(config, cmd)
    assert config == LayoutConfig()


@pytest.mark.parametrize(
    "text",
    [
        "--outer-gap 7",
        "--ig-left 3 --og-bottom 0",
        "--split-perc 0.3 --hsplit-perc 0.7",
        "--start-hsplit",
    ],
)
def test_apply_command_idempotent(text):
    """Test applying the same set command twice is the same as once"""
    once, twice = LayoutConfig(), LayoutConfig()
    run(once, text)
    run(twice, text)
    run(twice, text)
    assert once == twice
