class IdenticonError(Exception):
    """Base class for everything this package raises on its own."""


class MalformedDigestError(IdenticonError, AssertionError):
    """
    The digest is too short for the stage reading it.
    Only a broken hasher can cause this, so callers should not recover from it.
    """


class MissingStageError(IdenticonError, AssertionError):
    """A stage read an Image field that an earlier stage has not set yet."""


class ConfigurationError(IdenticonError, ValueError):
    pass
