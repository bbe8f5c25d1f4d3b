"""Exception classes for ansi-truncate."""


class TruncationError(Exception):
    """Base truncation error."""

    pass


class UnsupportedPositionError(TruncationError, ValueError):
    """Position selector is not a known name or a non-negative integer."""

    def __init__(self, position: object):
        self.position = position
        super().__init__(f"unsupported position: {position!r}")
