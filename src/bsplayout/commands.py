"""Layout commands: the typed ``LayoutCommand``, the parser that builds it from
``riverctl send-layout-cmd`` strings or startup arguments, and the interpreter
that applies it to a ``LayoutConfig``.

Commands may be written with or without leading dashes, these are the same::

    riverctl send-layout-cmd bsp-layout "--inc-vsplit 0.05 --ig-left 8"
    riverctl send-layout-cmd bsp-layout "inc-vsplit 0.05 ig-left 8"
"""

import argparse
import math
from dataclasses import dataclass, fields
from typing import Optional, Sequence, Union

from .config import LayoutConfig
from .errors import ConfigError

SPLIT_PERC_MAX = 0.9999
SPLIT_PERC_MIN = 0.0001
# river-layout-v3 carries view coordinates as int32
GAP_MAX = 2**31 - 1


@dataclass
class LayoutCommand:
    """A parsed layout command, every effect is optional and they may be combined"""

    default_inner_gap: Optional[int] = None
    ig_left: Optional[int] = None
    ig_right: Optional[int] = None
    ig_top: Optional[int] = None
    ig_bottom: Optional[int] = None
    default_outer_gap: Optional[int] = None
    og_left: Optional[int] = None
    og_right: Optional[int] = None
    og_top: Optional[int] = None
    og_bottom: Optional[int] = None
    default_split_perc: Optional[float] = None
    vsplit_perc: Optional[float] = None
    hsplit_perc: Optional[float] = None
    inc_vsplit: Optional[float] = None
    inc_hsplit: Optional[float] = None
    dec_vsplit: Optional[float] = None
    dec_hsplit: Optional[float] = None
    start_hsplit: bool = False
    start_vsplit: bool = False
    reverse: bool = False

    GAPS = (
        "default_inner_gap",
        "ig_left",
        "ig_right",
        "ig_top",
        "ig_bottom",
        "default_outer_gap",
        "og_left",
        "og_right",
        "og_top",
        "og_bottom",
    )
    PERCS = ("default_split_perc", "vsplit_perc", "hsplit_perc")
    DELTAS = ("inc_vsplit", "inc_hsplit", "dec_vsplit", "dec_hsplit")

    def validate(self):
        """Check every effect of the command, raise ConfigError on the first invalid one"""
        if self.start_hsplit and self.start_vsplit:
            raise ConfigError(
                "start-hsplit and start-vsplit are mutually exclusive. Please select only one"
            )
        for name in self.GAPS:
            gap = getattr(self, name)
            if gap is None:
                continue
            if not is_integer(gap):
                raise ConfigError(f"{dashed(name)} must be an integer, got {gap!r}")
            if not 0 <= gap <= GAP_MAX:
                raise ConfigError(
                    f"{dashed(name)} must be between 0 and {GAP_MAX}, got {gap}"
                )
        for name in self.PERCS + self.DELTAS:
            value = getattr(self, name)
            if value is not None and not is_number(value):
                raise ConfigError(f"{dashed(name)} must be a number, got {value!r}")
        for name in self.PERCS:
            perc = getattr(self, name)
            if perc is not None and not 0.0 < perc < 1.0:
                raise ConfigError(
                    f"{dashed(name)} must be greater than 0 and less than 1, got {perc}"
                )
        for name in self.DELTAS:
            delta = getattr(self, name)
            if delta is not None and not (math.isfinite(delta) and delta > 0.0):
                raise ConfigError(f"{dashed(name)} must be greater than 0, got {delta}")


def dashed(name: str) -> str:
    """Convert a field name to its command keyword"""
    return name.replace("_", "-")


def is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def increase(perc: float, delta: float) -> float:
    """Increase a split percentage, stopping right below 1"""
    return perc + delta if perc + delta < 1.0 else SPLIT_PERC_MAX


def decrease(perc: float, delta: float) -> float:
    """Decrease a split percentage, stopping right above 0"""
    return perc - delta if perc - delta > 0.0 else SPLIT_PERC_MIN


def apply_command(config: LayoutConfig, cmd: LayoutCommand):
    """Apply the command to the configuration

    The command is validated as a whole before anything is changed, so the
    configuration is either fully updated or left as it was.

    :param config: the configuration to be changed in place
    :param cmd: the parsed command
    :raises ConfigError: any effect of the command is invalid
    """
    cmd.validate()

    if cmd.start_hsplit:
        config.start_hsplit = True
    elif cmd.start_vsplit:
        config.start_hsplit = False

    if cmd.reverse:
        config.reversed = not config.reversed

    if cmd.default_split_perc is not None:
        config.vsplit_perc = cmd.default_split_perc
        config.hsplit_perc = cmd.default_split_perc
    if cmd.vsplit_perc is not None:
        config.vsplit_perc = cmd.vsplit_perc
    if cmd.hsplit_perc is not None:
        config.hsplit_perc = cmd.hsplit_perc

    if cmd.default_outer_gap is not None:
        config.set_all_outer_gaps(cmd.default_outer_gap)
    if cmd.default_inner_gap is not None:
        config.set_all_inner_gaps(cmd.default_inner_gap)
    # per edge gaps override the defaults above
    for name in LayoutCommand.GAPS:
        gap = getattr(cmd, name)
        if gap is not None and not name.startswith("default_"):
            setattr(config, name, gap)

    if cmd.inc_hsplit is not None:
        config.hsplit_perc = increase(config.hsplit_perc, cmd.inc_hsplit)
    if cmd.inc_vsplit is not None:
        config.vsplit_perc = increase(config.vsplit_perc, cmd.inc_vsplit)
    if cmd.dec_hsplit is not None:
        config.hsplit_perc = decrease(config.hsplit_perc, cmd.dec_hsplit)
    if cmd.dec_vsplit is not None:
        config.vsplit_perc = decrease(config.vsplit_perc, cmd.dec_vsplit)


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser raising ConfigError instead of exiting the process"""

    def error(self, message: str):
        raise ConfigError(message)


# (flags, dest, type, help, heading)
OPTIONS = (
    (
        ("-i", "--inner-gap"),
        "default_inner_gap",
        int,
        "pixels between all inner edges of adjacent windows",
        "inner gap",
    ),
    (
        ("-l", "--ig-left"),
        "ig_left",
        int,
        "pixels on the left inner edge, overrides --inner-gap",
        "inner gap",
    ),
    (
        ("-r", "--ig-right"),
        "ig_right",
        int,
        "pixels on the right inner edge, overrides --inner-gap",
        "inner gap",
    ),
    (
        ("-t", "--ig-top"),
        "ig_top",
        int,
        "pixels on the top inner edge, overrides --inner-gap",
        "inner gap",
    ),
    (
        ("-b", "--ig-bottom"),
        "ig_bottom",
        int,
        "pixels on the bottom inner edge, overrides --inner-gap",
        "inner gap",
    ),
    (
        ("-o", "--outer-gap"),
        "default_outer_gap",
        int,
        "pixels between windows and all screen edges",
        "outer gap",
    ),
    (
        ("-L", "--og-left"),
        "og_left",
        int,
        "pixels from the left screen edge, overrides --outer-gap",
        "outer gap",
    ),
    (
        ("-R", "--og-right"),
        "og_right",
        int,
        "pixels from the right screen edge, overrides --outer-gap",
        "outer gap",
    ),
    (
        ("-T", "--og-top"),
        "og_top",
        int,
        "pixels from the top screen edge, overrides --outer-gap",
        "outer gap",
    ),
    (
        ("-B", "--og-bottom"),
        "og_bottom",
        int,
        "pixels from the bottom screen edge, overrides --outer-gap",
        "outer gap",
    ),
    (
        ("-s", "--split-perc"),
        "default_split_perc",
        float,
        "share of the primary window after any split",
        "split",
    ),
    (
        ("-v", "--vsplit-perc"),
        "vsplit_perc",
        float,
        "share of the primary window after a vertical split, overrides --split-perc",
        "split",
    ),
    (
        ("-H", "--hsplit-perc"),
        "hsplit_perc",
        float,
        "share of the primary window after a horizontal split, overrides --split-perc",
        "split",
    ),
    (("--inc-vsplit",), "inc_vsplit", float, "increase the vertical split share", "split"),
    (("--inc-hsplit",), "inc_hsplit", float, "increase the horizontal split share", "split"),
    (("--dec-vsplit",), "dec_vsplit", float, "decrease the vertical split share", "split"),
    (("--dec-hsplit",), "dec_hsplit", float, "decrease the horizontal split share", "split"),
)

FLAGS = (
    ("--start-hsplit", "start_hsplit", "split top/bottom first", "split"),
    ("--start-vsplit", "start_vsplit", "split left/right first", "split"),
    ("--reverse", "reverse", "toggle the order views are laid out in", "other"),
)

KEYWORDS = frozenset(
    [flag[2:] for flags, *_ in OPTIONS for flag in flags if flag.startswith("--")]
    + [flag[2:] for flag, *_ in FLAGS]
)


def add_command_arguments(parser: argparse.ArgumentParser):
    """Register every layout command option on the parser"""
    groups = {}

    def group(heading: str):
        if heading not in groups:
            groups[heading] = parser.add_argument_group(f"{heading} options")
        return groups[heading]

    for flags, dest, typ, text, heading in OPTIONS:
        group(heading).add_argument(*flags, dest=dest, type=typ, help=text)
    for flag, dest, text, heading in FLAGS:
        group(heading).add_argument(flag, dest=dest, action="store_true", help=text)


def build_parser(prog: str = "bsp-layout") -> CommandParser:
    """Build the parser for runtime layout commands"""
    parser = CommandParser(prog=prog, add_help=False, allow_abbrev=False)
    add_command_arguments(parser)
    return parser


def normalize(tokens: Sequence[str]) -> list:
    """Prefix known keywords written without dashes"""
    return [f"--{t}" if t in KEYWORDS else t for t in tokens]


def to_command(namespace: argparse.Namespace) -> LayoutCommand:
    """Pick the command fields out of a parsed namespace"""
    return LayoutCommand(
        **{f.name: getattr(namespace, f.name) for f in fields(LayoutCommand)}
    )


def parse_command(
    args: Union[str, Sequence[str]], parser: Optional[argparse.ArgumentParser] = None
) -> LayoutCommand:
    """Parse a command string or an argument list into a LayoutCommand

    :param args: a whitespace separated command or a list of tokens
    :param parser: optional parser, defaults to the runtime command parser
    :raises ConfigError: unknown keyword or malformed argument
    :rtype: LayoutCommand
    """
    if isinstance(args, str):
        args = args.split()
    if parser is None:
        parser = build_parser()
    return to_command(parser.parse_args(normalize(args)))
