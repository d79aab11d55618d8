"""Exception types raised by hashicon."""


class HashiconError(Exception):
    """Base class for all hashicon errors."""


class InvalidInputError(HashiconError, ValueError):
    """The caller supplied an unusable hash or size.

    Raised for empty hashes, hashes too short to derive a hue from,
    malformed hex digests, and non-positive raster sizes.
    """


class ConfigurationError(HashiconError, ValueError):
    """A style, palette, or shape category is inconsistent."""


class InternalInvariantError(HashiconError, RuntimeError):
    """An internal computation produced a value outside its contract."""
