"""Runtime exceptions."""


class PrivgateError(Exception):
    """Base exception for privgate runtime errors."""

    pass


class RegistryClosedError(PrivgateError):
    """A request was registered after the owning surface was torn down."""

    pass


class RegistryFullError(PrivgateError):
    """The surface already has the maximum number of pending requests."""

    pass


class SubscriptionError(PrivgateError):
    """Subscription lifecycle misuse (double attach, closed handle)."""

    pass


class InvalidTransitionError(PrivgateError):
    """Illegal gate state transition."""

    def __init__(self, current, target):
        super().__init__(f"Invalid gate transition: {current.value} -> {target.value}")
        self.current = current
        self.target = target


class ScriptExecutionError(PrivgateError):
    """A privileged script could not be run or exited with an error."""

    pass


class UnknownEntryError(PrivgateError):
    """No configuration entry with the given key."""

    pass
