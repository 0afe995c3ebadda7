"""Exceptions raised while checking and loading a scene."""


class CubError(Exception):
    """Base class for every error the game reports."""


class ArgumentError(CubError):
    """The command line is wrong: argument count, extension or missing file."""


class ConfigError(CubError):
    """A texture or colour line of the scene file is invalid."""


class MapError(CubError):
    """The map part of the scene file is invalid."""