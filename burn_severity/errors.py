# burn_severity/errors.py


class BurnSeverityError(ValueError):
    """Base class for input errors raised by the burn severity core."""


class ShapeMismatchError(BurnSeverityError):
    """Pre- and post-fire rasters are not co-registered."""


class InvalidThresholdTableError(BurnSeverityError):
    """Threshold table is not 8 strictly ascending values."""


class NoValidPixelsError(BurnSeverityError):
    """A region holds no valid classified pixels, so percentages are undefined."""


class RegionTooLargeError(BurnSeverityError):
    """A region covers more pixels than the configured budget."""

    def __init__(self, n_pixels, max_pixels):
        self.n_pixels = n_pixels
        self.max_pixels = max_pixels
        super().__init__(
            f"Too many pixels in the region: {n_pixels} > max_pixels={max_pixels}. "
            "Use a smaller region or raise max_pixels."
        )
