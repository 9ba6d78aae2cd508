"""Seekable in-memory byte streams."""

from stringstream.streams.interface import StreamInterface, Whence
from stringstream.streams.string_stream import SeekableByteBuffer, StreamState

__all__ = [
    "SeekableByteBuffer",
    "StreamInterface",
    "StreamState",
    "Whence",
]
