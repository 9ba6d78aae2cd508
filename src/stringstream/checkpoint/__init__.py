"""Duplication and persistence of stream buffers."""

from stringstream.checkpoint.snapshot import (
    StreamSnapshot,
    clone,
    dumps,
    loads,
    restore_buffer,
)

__all__ = [
    "StreamSnapshot",
    "clone",
    "dumps",
    "loads",
    "restore_buffer",
]
