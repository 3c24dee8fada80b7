"""Exceptions raised by the network simulator."""


class InvalidDeviceError(ValueError):
    """Raised when a missing device is passed for registration."""


class UnknownNodeError(LookupError):
    """Raised when a link refers to a device that was never registered."""

    def __init__(self, *names: str) -> None:
        self.names = names
        super().__init__(f"Unknown node(s): {', '.join(map(str, names))}")
