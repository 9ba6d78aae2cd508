"""
Capability contract shared by seekable byte streams.
"""

import os
from enum import IntEnum
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union


class Whence(IntEnum):
    """Reference point for a seek; values match os.SEEK_*."""
    SET = os.SEEK_SET
    CUR = os.SEEK_CUR
    END = os.SEEK_END


class StreamInterface(ABC):
    """
    Read/write/seek contract for a byte stream.

    Implementations report absence of a size with None rather than raising,
    and raise on every other operation once closed.
    """

    @abstractmethod
    def close(self) -> None:
        """Release the stream. Calling it again has no effect."""
        pass

    @abstractmethod
    def detach(self) -> Optional[Any]:
        """Hand the underlying resource to the caller and close the stream."""
        pass

    @abstractmethod
    def get_size(self) -> Optional[int]:
        pass

    @abstractmethod
    def tell(self) -> int:
        pass

    @abstractmethod
    def eof(self) -> bool:
        pass

    @abstractmethod
    def seek(self, offset: int, whence: Union[Whence, int] = Whence.SET) -> None:
        pass

    @abstractmethod
    def read(self, length: Optional[int] = None) -> bytes:
        pass

    @abstractmethod
    def write(self, data: bytes) -> int:
        pass

    @abstractmethod
    def get_contents(self, length: int = 0, delimiter: bytes = b"") -> bytes:
        """
        Read from the current position.

        A length of 0 or less returns every remaining byte; otherwise at most
        `length` bytes, stopping before `delimiter` when one is given.
        """
        pass

    @abstractmethod
    def getvalue(self) -> bytes:
        """Return the entire content without moving the cursor."""
        pass

    def __bytes__(self) -> bytes:
        return self.getvalue()

    @abstractmethod
    def get_metadata(self, key: Optional[str] = None) -> Union[Dict[str, Any], Any, None]:
        pass

    @abstractmethod
    def is_readable(self) -> bool:
        pass

    @abstractmethod
    def is_writable(self) -> bool:
        pass

    @abstractmethod
    def is_seekable(self) -> bool:
        pass

    def rewind(self) -> None:
        """Seek back to the start of the stream."""
        self.seek(0, Whence.SET)
