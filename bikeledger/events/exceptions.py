class NoSuchEventError(Exception):
    """Raised when an event does not exist on a hub."""


class NoSuchListenerError(Exception):
    """Raised when removing a handler that was never subscribed."""


class InvalidHandlerError(Exception):
    """Raised when a handler's signature does not match the event it subscribes to."""
