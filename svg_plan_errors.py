"""
Exceptions raised by the floor plan mirror and export stages.
"""


class FloorPlanError(Exception):
    """Base class for all floor plan processing errors."""


class FileAccessError(FloorPlanError):
    """An input or output file could not be read, written or created."""


class ParseFailureError(FloorPlanError):
    """The HTML document could not be parsed."""


class MissingElementError(FloorPlanError, LookupError):
    """The document does not contain the requested element."""


class RasterizerError(FloorPlanError):
    """A rasterizer is unavailable or failed to produce a PNG."""
