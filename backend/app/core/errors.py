class ConfigurationError(Exception):
    """Raised when required configuration (the signing key) is missing."""


class TokenError(Exception):
    """A token failed to parse, verify or is expired.

    Never leaves the codec: it is collapsed into a single "invalid" outcome so
    callers cannot tell the failure reasons apart.
    """


class StorageError(Exception):
    """The token store could not read or persist a record."""
