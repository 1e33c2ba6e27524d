# terrain_generator/exceptions.py

"""Exceptions raised by the terrain generator."""


class ConfigurationError(ValueError):
    """
    Raised when generation parameters violate a precondition. Always raised
    before any grid is allocated, so no partial terrain is ever exposed.
    """


class PersistenceError(OSError):
    """
    Raised when a texture cannot be encoded or written. The generated maps
    are not affected by this failure.
    """
