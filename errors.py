"""Error types raised while assembling Support API requests."""


class ParameterShapeError(ValueError):
    """Raised when caller-supplied arguments cannot be mapped onto the wire format."""


class InvalidKeyError(ParameterShapeError):
    """Raised for mapping keys that are neither strings nor enum members."""


class KeyCollisionError(ParameterShapeError):
    """Raised when two keys in one mapping recase to the same wire key."""

    def __init__(self, wire_key: str, first: str, second: str):
        self.wire_key = wire_key
        self.first = first
        self.second = second
        super().__init__(f"keys {first!r} and {second!r} both map to {wire_key!r}")


class UnknownOperationError(ValueError):
    """Raised for operation names outside the Support API catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown operation {name!r}")
