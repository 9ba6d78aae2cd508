"""
Snapshots for duplicating and persisting stream buffers.

A snapshot is the pair (content, position). Restoring one always builds a
fresh buffer through SeekableByteBuffer.construct followed by a seek, so the
restored store is never shared with the source.
"""

import json
import zlib
import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from stringstream.config import config
from stringstream.streams.interface import StreamInterface, Whence
from stringstream.streams.string_stream import SeekableByteBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamSnapshot:
    """Full content and cursor of a buffer at one point in time."""
    content: bytes
    position: int

    @classmethod
    def capture(cls, stream: StreamInterface) -> 'StreamSnapshot':
        """Record the content and position of `stream` without moving it."""
        position = stream.tell()
        return cls(content=stream.getvalue(), position=position)

    def restore(self) -> SeekableByteBuffer:
        return restore_buffer(self.content, self.position)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary."""
        return {
            'buffer': base64.b64encode(self.content).decode('ascii'),
            'pos': self.position,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StreamSnapshot':
        """
        Rebuild a snapshot from `to_dict` output.

        Raises:
            ValueError: If fields are missing or malformed
        """
        if not isinstance(data, dict) or 'buffer' not in data or 'pos' not in data:
            raise ValueError("snapshot requires 'buffer' and 'pos' fields")

        position = data['pos']
        if not isinstance(position, int) or isinstance(position, bool) or position < 0:
            raise ValueError(f"invalid snapshot position: {position!r}")

        try:
            content = base64.b64decode(data['buffer'], validate=True)
        except (binascii.Error, TypeError) as e:
            raise ValueError(f"invalid snapshot buffer: {e}") from e

        return cls(content=content, position=position)


def restore_buffer(content: bytes, position: int) -> SeekableByteBuffer:
    """Construct a buffer from `content` and seek it to `position`."""
    buffer = SeekableByteBuffer.construct(content)
    buffer.seek(position, Whence.SET)
    return buffer


def clone(stream: StreamInterface) -> SeekableByteBuffer:
    """Duplicate `stream` into an independent buffer."""
    return StreamSnapshot.capture(stream).restore()


def dumps(stream: StreamInterface, compress: Optional[bool] = None) -> bytes:
    """
    Serialize a stream's content and position.

    Args:
        stream: Open stream to serialize
        compress: zlib-compress the payload (None to follow config)

    Returns:
        JSON document, compressed if requested
    """
    snapshot = StreamSnapshot.capture(stream)
    payload = json.dumps(snapshot.to_dict()).encode('utf-8')
    original_size = len(payload)

    if config.snapshot_compression if compress is None else compress:
        payload = zlib.compress(payload, config.compression_level)

    logger.debug("Serialized %s at position %d (%s payload, %s encoded)",
                 config.format_bytes(len(snapshot.content)), snapshot.position,
                 config.format_bytes(len(payload)), config.format_bytes(original_size))
    return payload


def loads(payload: bytes) -> SeekableByteBuffer:
    """
    Rebuild a buffer from `dumps` output, compressed or not.

    Raises:
        ValueError: If the payload cannot be decoded
    """
    payload = bytes(payload)
    if not payload.lstrip().startswith(b'{'):
        try:
            payload = zlib.decompress(payload)
        except zlib.error as e:
            raise ValueError(f"invalid snapshot payload: {e}") from e

    try:
        data = json.loads(payload.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"invalid snapshot payload: {e}") from e

    snapshot = StreamSnapshot.from_dict(data)
    logger.debug("Restoring %s at position %d",
                 config.format_bytes(len(snapshot.content)), snapshot.position)
    return snapshot.restore()
