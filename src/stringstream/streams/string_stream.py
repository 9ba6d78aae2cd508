"""
SeekableByteBuffer: treat a byte string as an in-memory random-access file.
"""

import logging
import operator
from enum import Enum
from typing import Any, Dict, Optional, Union

from stringstream.exceptions import InvalidArgumentError, InvalidStateError
from stringstream.memory import monitor
from stringstream.streams.interface import StreamInterface, Whence

logger = logging.getLogger(__name__)

PAD_BYTE = b"\0"


class StreamState(Enum):
    """Lifecycle of a buffer. CLOSED is terminal."""
    OPEN = "open"
    CLOSED = "closed"


class SeekableByteBuffer(StreamInterface):
    """
    A growable byte store with a single read/write cursor.

    Seeking past the end materializes NUL bytes up to the target, the way a
    sparse file would read back. Writing overwrites in place and extends the
    store when it runs past the end, but never pads.
    """

    def __init__(self, initial: Union[bytes, bytearray, memoryview] = b""):
        """
        Initialize the buffer with a copy of `initial`, positioned at 0.

        Args:
            initial: Bytes-like seed content (str is rejected)
        """
        self._state = StreamState.OPEN
        self._store: Optional[bytearray] = bytearray()
        self._pos = 0
        self._eof = False

        self.write(initial)
        self.rewind()

    @classmethod
    def construct(cls, initial: Union[bytes, bytearray, memoryview] = b"") -> 'SeekableByteBuffer':
        """Build a fresh buffer holding a copy of `initial`."""
        return cls(initial)

    # Lifecycle

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is StreamState.CLOSED

    def close(self) -> None:
        """Discard the store. Closing twice is a no-op."""
        if self._state is StreamState.OPEN:
            logger.debug("Closing buffer of %d bytes", len(self._store))
            self._store = None
            self._state = StreamState.CLOSED

    def detach(self) -> Optional[bytearray]:
        """
        Hand the store to the caller and close this buffer.

        Returns:
            The underlying bytearray, or None if already closed or detached
        """
        if self._state is StreamState.CLOSED:
            return None

        store = self._store
        self._store = None
        self._state = StreamState.CLOSED
        logger.debug("Detached buffer of %d bytes", len(store))
        return store

    def _check_open(self, operation: str) -> None:
        if self._state is StreamState.CLOSED:
            raise InvalidStateError(operation)

    # Size and position

    def get_size(self) -> Optional[int]:
        """Current byte length, or None once closed."""
        if self._state is StreamState.CLOSED:
            return None
        return len(self._store)

    def tell(self) -> int:
        self._check_open("tell")
        return self._pos

    def eof(self) -> bool:
        """True only after a read ran short at or past the end of the store."""
        self._check_open("eof")
        return self._eof

    def seek(self, offset: int, whence: Union[Whence, int] = Whence.SET) -> None:
        """
        Move the cursor.

        Args:
            offset: Byte offset relative to `whence`
            whence: Whence.SET, Whence.CUR or Whence.END (os.SEEK_* ints also work)

        Raises:
            InvalidStateError: If the buffer is closed
            InvalidArgumentError: If whence is unknown or the target is negative
            ResourceFaultError: If padding up to the target cannot be allocated
        """
        self._check_open("seek")
        offset = operator.index(offset)
        try:
            whence = Whence(whence)
        except ValueError:
            raise InvalidArgumentError(f"invalid whence: {whence!r}", "seek") from None

        if whence is Whence.CUR:
            target = self._pos + offset
        elif whence is Whence.END:
            target = len(self._store) + offset
        else:
            target = offset

        if target < 0:
            raise InvalidArgumentError(f"cannot seek to negative position {target}", "seek")

        if target > len(self._store):
            self._pad_to(target)

        self._pos = target
        self._eof = False

    def _pad_to(self, target: int) -> None:
        """Materialize NUL bytes from the current end of the store up to `target`."""
        growth = target - len(self._store)
        monitor.ensure_capacity(target, growth, "seek")
        self._store.extend(PAD_BYTE * growth)
        logger.debug("Padded buffer with %d NUL bytes to %d", growth, target)

    # Reading and writing

    def read(self, length: Optional[int] = None) -> bytes:
        """
        Read up to `length` bytes and advance past them.

        A short result is the end-of-data signal and sets the EOF flag. None or
        a negative length reads everything that remains.
        """
        self._check_open("read")
        size = len(self._store)
        if length is None or length < 0:
            length = size - self._pos

        end = min(self._pos + length, size)
        chunk = bytes(self._store[self._pos:end])
        if self._pos + length > size:
            self._eof = True
        self._pos = end
        return chunk

    def write(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """
        Write `data` at the cursor, overwriting in place and extending the
        store as needed.

        Returns:
            Number of bytes written
        """
        self._check_open("write")
        data = _as_bytes(data)

        end = self._pos + len(data)
        monitor.ensure_capacity(end, end - len(self._store), "write")

        self._store[self._pos:end] = data
        self._pos = end
        self._eof = False
        return len(data)

    def peek(self) -> bytes:
        """
        Return the next byte without consuming it, or b"" at end of data.

        A peek at end of data is a short read and sets the EOF flag.
        """
        self._check_open("peek")
        pos = self._pos
        chunk = self.read(1)
        if chunk:
            self._pos = pos
        return chunk

    def get_contents(self, length: int = 0,
                     delimiter: Union[bytes, bytearray, memoryview] = b"") -> bytes:
        """
        Read from the cursor.

        Args:
            length: Maximum bytes to read; 0 or less reads everything remaining
            delimiter: Stop before this marker when non-empty (only with length > 0)

        Returns:
            The bytes read. The delimiter itself is never returned and is left
            unconsumed.
        """
        self._check_open("get_contents")
        if length is None or length <= 0:
            return self._read_remaining()

        delimiter = _as_bytes(delimiter)
        if delimiter:
            return self._read_delimited(length, delimiter, discard=False)
        return self.read(length)

    def ignore(self, length: int = 0,
               delimiter: Union[bytes, bytearray, memoryview] = b"") -> None:
        """Skip forward like get_contents, consuming the delimiter if one is found."""
        self._check_open("ignore")
        if length is None or length <= 0:
            self._read_remaining()
            return

        delimiter = _as_bytes(delimiter)
        if delimiter:
            self._read_delimited(length, delimiter, discard=True)
        else:
            self.read(length)

    def _read_remaining(self) -> bytes:
        remaining = len(self._store) - self._pos
        if remaining > 0:
            return self.read(remaining)
        return b""

    def _read_delimited(self, max_length: int, delimiter: bytes, discard: bool) -> bytes:
        """
        Read up to `max_length` bytes, stopping at the first `delimiter` that
        lies entirely within them.

        With discard the delimiter is consumed and the cursor lands after it;
        otherwise the cursor stops on it so the next read sees it again.
        """
        start = self._pos
        limit = min(start + max_length, len(self._store))
        index = self._store.find(delimiter, start, limit)
        if index < 0:
            return self.read(max_length)

        chunk = bytes(self._store[start:index])
        self._pos = index + len(delimiter) if discard else index
        return chunk

    # Capabilities and metadata

    def is_readable(self) -> bool:
        self._check_open("is_readable")
        return True

    def is_writable(self) -> bool:
        self._check_open("is_writable")
        return True

    def is_seekable(self) -> bool:
        self._check_open("is_seekable")
        return True

    def get_metadata(self, key: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """No metadata is kept: {} for all keys, None for a specific one."""
        self._check_open("get_metadata")
        return None if key is not None else {}

    # Whole-content views

    def getvalue(self) -> bytes:
        """Return the entire store without moving the cursor."""
        self._check_open("getvalue")
        return bytes(self._store)

    def __len__(self) -> int:
        self._check_open("len")
        return len(self._store)

    def __enter__(self) -> 'SeekableByteBuffer':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._state is StreamState.CLOSED:
            return f"<{type(self).__name__} closed>"
        return f"<{type(self).__name__} size={len(self._store)} pos={self._pos}>"

    # Duplication and pickling

    def clone(self) -> 'SeekableByteBuffer':
        """Return an independent copy with the same content and cursor."""
        from stringstream.checkpoint.snapshot import clone
        return clone(self)

    def __copy__(self) -> 'SeekableByteBuffer':
        return self.clone()

    def __deepcopy__(self, memo) -> 'SeekableByteBuffer':
        return self.clone()

    def __reduce__(self):
        from stringstream.checkpoint.snapshot import restore_buffer
        self._check_open("pickle")
        return (restore_buffer, (bytes(self._store), self._pos))


def _as_bytes(data: Any) -> bytes:
    """Copy a bytes-like object; text must be encoded by the caller."""
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, not str")
    return memoryview(data).tobytes()
