"""
Exceptions raised by stream buffers.
"""

from typing import Optional


class StreamError(RuntimeError):
    """
    Base class for all stream failures.

    Attributes:
        message -- explanation of the error
        operation -- name of the stream operation that failed, if known
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        self.message = message
        self.operation = operation
        super().__init__(self.message)

    def __str__(self):
        if self.operation is not None:
            return f"{self.message} (operation={self.operation})"
        return self.message


class InvalidStateError(StreamError):
    """
    Raised when an operation is attempted on a closed or detached stream.

    A closed stream never reopens; construct a new one instead.
    """

    def __init__(self, operation: Optional[str] = None):
        super().__init__("stream is closed", operation)


class InvalidArgumentError(StreamError, ValueError):
    """Raised for arguments a stream cannot honour, such as a negative seek target."""


class ResourceFaultError(StreamError, MemoryError):
    """
    Raised when growing the store would exceed the configured size cap or
    the memory currently available.

    Attributes:
        requested -- total store size in bytes that was requested
        growth -- number of bytes the store would have grown by
    """

    def __init__(self, message: str, requested: int = 0, growth: int = 0,
                 operation: Optional[str] = None):
        self.requested = requested
        self.growth = growth
        super().__init__(message, operation)
