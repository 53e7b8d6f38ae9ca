"""Observer configuration errors."""


class ObserverError(Exception):
    """Base class for observer setup errors."""


class ObserverConfigError(ObserverError, ValueError):
    """The observer config file is malformed."""


class ObserverLoadError(ObserverError):
    """A configured observer could not be imported, built or accepted."""
