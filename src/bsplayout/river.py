"""River layout client: answers layout demands of the river compositor through
the river-layout-v3 protocol and routes ``riverctl send-layout-cmd`` strings to
the layout commands.

This depends on pywayland: https://github.com/flacjacket/pywayland/ and its
generated river-layout-v3 bindings, both are loaded by ``run`` only.
"""

import logging
from typing import List, Optional

from .commands import apply_command, parse_command
from .config import LayoutConfig
from .errors import ConfigError, LayoutError
from .tiler.tilers import LAYOUT_NAME, GeneratedLayout, generate_layout

logger = logging.getLogger(__name__)

NAMESPACE = LAYOUT_NAME

BINDINGS_HELP = """
Your pywayland package does not have bindings for river-layout-v3.
You can generate the bindings with the following command:
     python3 -m pywayland.scanner -i /usr/share/wayland/wayland.xml river-layout-v3.xml
"""


class LayoutSession:
    """LayoutSession owns the configuration shared by all outputs and handles
    the events river sends to the layout objects"""

    config: LayoutConfig
    running: bool = True

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self.running = True

    def __repr__(self) -> str:
        return f"<LayoutSession {self.config}>"

    def apply_command(self, command: str):
        """Parse and apply a layout command, the configuration is unchanged on error"""
        apply_command(self.config, parse_command(command))

    def generate_layout(
        self, view_count: int, usable_width: int, usable_height: int
    ) -> GeneratedLayout:
        """Generate the layout with the current configuration"""
        return generate_layout(self.config, view_count, usable_width, usable_height)

    def handle_layout_demand(
        self, layout, view_count, usable_width, usable_height, tags, serial
    ):
        """Push one rectangle per view and commit, skip the commit if no layout could be made"""
        logger.debug(
            "layout demand: %d views on %dx%d tags %s serial %s",
            view_count,
            usable_width,
            usable_height,
            tags,
            serial,
        )
        try:
            generated = self.generate_layout(view_count, usable_width, usable_height)
        except LayoutError as err:
            logger.error("failed to generate layout: %s", err)
            return
        for rect in generated.views:
            layout.push_view_dimensions(
                rect.x, rect.y, rect.width, rect.height, serial
            )
        layout.commit(generated.layout_name, serial)

    def handle_user_command(self, layout, command):
        """Apply the command sent with ``riverctl send-layout-cmd``"""
        logger.info("user command: %s", command)
        try:
            self.apply_command(command)
        except ConfigError as err:
            logger.error("invalid layout command %r: %s", command, err)
            return
        logger.debug("%s", self)

    def handle_namespace_in_use(self, layout):
        """Another client took our namespace, nothing left to do but quit"""
        logger.error("namespace %s already in use", NAMESPACE)
        self.running = False


class Output:
    """A wl_output and the layout object river created for it"""

    def __init__(self, global_id: int, output):
        self.id = global_id
        self.output = output
        self.layout = None

    def __repr__(self) -> str:
        return f"<Output #{self.id}>"

    def configure(self, layout_manager, session: LayoutSession):
        """Create the layout object and hook the session up to its events"""
        if self.layout is not None or layout_manager is None:
            return
        self.layout = layout_manager.get_layout(self.output, NAMESPACE)
        self.layout.user_data = self
        self.layout.dispatcher["layout_demand"] = session.handle_layout_demand
        self.layout.dispatcher["user_command"] = session.handle_user_command
        self.layout.dispatcher["namespace_in_use"] = session.handle_namespace_in_use
        logger.info("%s configured", self)

    def destroy(self):
        """Release the wayland objects"""
        if self.layout is not None:
            self.layout.destroy()
        if self.output is not None:
            self.output.destroy()


def run(session: LayoutSession):
    """Connect to the compositor and serve layout demands until stopped"""
    # pylint: disable=import-outside-toplevel
    from pywayland.client import Display
    from pywayland.protocol.wayland import WlOutput

    try:
        from pywayland.protocol.river_layout_v3 import RiverLayoutManagerV3
    except ImportError as err:
        raise RuntimeError(BINDINGS_HELP) from err

    layout_manager = None
    outputs: List[Output] = []

    def registry_handle_global(registry, global_id, interface, version):
        nonlocal layout_manager
        if interface == "river_layout_manager_v3":
            layout_manager = registry.bind(global_id, RiverLayoutManagerV3, version)
        elif interface == "wl_output":
            output = Output(global_id, registry.bind(global_id, WlOutput, version))
            output.configure(layout_manager, session)
            outputs.append(output)

    def registry_handle_global_remove(registry, global_id):
        for output in list(outputs):
            if output.id == global_id:
                logger.info("%s removed", output)
                output.destroy()
                outputs.remove(output)

    display = Display()
    display.connect()
    try:
        registry = display.get_registry()
        registry.dispatcher["global"] = registry_handle_global
        registry.dispatcher["global_remove"] = registry_handle_global_remove

        display.dispatch(block=True)
        display.roundtrip()

        if layout_manager is None:
            raise RuntimeError("no river_layout_manager_v3, is river running?")

        # outputs announced before the layout manager
        for output in outputs:
            output.configure(layout_manager, session)

        logger.info("serving layout demands in namespace %s", NAMESPACE)
        while session.running and display.dispatch(block=True) != -1:
            pass
    finally:
        for output in outputs:
            output.destroy()
        outputs.clear()
        display.disconnect()
