"""Binary Space Partition layout generator for the river Wayland compositor"""

__version__ = "0.1.0"

from .commands import LayoutCommand, apply_command, parse_command
from .config import LayoutConfig
from .errors import BspLayoutError, ConfigError, LayoutError
from .tiler.partition import Axis, Rectangle, split
from .tiler.tilers import GeneratedLayout, generate_layout
