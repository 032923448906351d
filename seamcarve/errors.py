"""Exceptions raised by the seam carving engine and its image I/O helpers."""


class SeamCarvingError(Exception):
    """Base class for seamcarve errors."""

    pass


class InvalidTarget(SeamCarvingError, ValueError):
    """Raised when a requested size cannot be reached by shrinking.

    Attributes:
        dimension: 'width' or 'height'
        requested: The value that was asked for
        maximum: The largest valid value (the current size of that dimension)
    """

    def __init__(self, dimension: str, requested, maximum: int):
        self.dimension = dimension
        self.requested = requested
        self.maximum = maximum
        super().__init__(
            f"Invalid target {dimension} {requested!r}: "
            f"must be an integer in [1, {maximum}]"
        )


class ImageDecodeError(SeamCarvingError):
    """Raised when an image file cannot be read or decoded."""

    pass


class ImageEncodeError(SeamCarvingError):
    """Raised when an image cannot be encoded or written."""

    pass
