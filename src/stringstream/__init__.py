"""
stringstream: treat byte strings as in-memory, randomly seekable files.

The central type is SeekableByteBuffer, a growable store with one cursor
that reads, writes, seeks (padding with NUL bytes past the end), peeks and
extracts delimited runs. Snapshots duplicate or persist a buffer as its
(content, position) pair.
"""

from stringstream.config import StreamConfig
from stringstream.exceptions import (
    StreamError,
    InvalidStateError,
    InvalidArgumentError,
    ResourceFaultError,
)
from stringstream.streams import SeekableByteBuffer, StreamInterface, StreamState, Whence
from stringstream.checkpoint import StreamSnapshot, clone, dumps, loads
from stringstream.memory import MemoryMonitor, MemoryPressureLevel

__version__ = "0.1.0"
__author__ = "stringstream contributors"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "StreamError",
    "InvalidStateError",
    "InvalidArgumentError",
    "ResourceFaultError",
    "SeekableByteBuffer",
    "StreamInterface",
    "StreamState",
    "Whence",
    "StreamSnapshot",
    "clone",
    "dumps",
    "loads",
    "MemoryMonitor",
    "MemoryPressureLevel",
]

# Configure default settings
StreamConfig.set_defaults()
