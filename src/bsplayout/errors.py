"""Errors raised by the layout generator"""


class BspLayoutError(Exception):
    """Base class of all errors raised by bsplayout"""


class ConfigError(BspLayoutError):
    """A layout command was malformed or rejected, the configuration is left untouched"""


class LayoutError(BspLayoutError):
    """A layout could not be generated with the current configuration"""
