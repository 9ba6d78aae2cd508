#!/usr/bin/env python3
"""
Basic usage examples for stringstream.
"""

import logging
from stringstream import (
    SeekableByteBuffer,
    StreamConfig,
    Whence,
    ResourceFaultError,
    dumps,
    loads,
)


def example_random_access():
    """Example: Read, write and seek like a file."""
    print("\n=== Random Access Example ===")

    stream = SeekableByteBuffer(b"sample")
    print(f"First three bytes: {stream.read(3)!r}")
    stream.seek(-1, Whence.CUR)
    print(f"Position after stepping back: {stream.tell()}")

    stream.rewind()
    stream.write(b"junk")
    print(f"After overwriting: {bytes(stream)!r}")

    # Seeking past the end materializes NUL bytes
    stream.seek(10)
    print(f"After padding: {bytes(stream)!r} (size {stream.get_size()})")


def example_delimited_reads():
    """Example: Split a header block on CRLF."""
    print("\n=== Delimited Read Example ===")

    stream = SeekableByteBuffer(b"Host: example.org\r\nAccept: */*\r\n\r\nbody")
    while True:
        line = stream.get_contents(1024, b"\r\n")
        stream.ignore(2)
        if not line:
            break
        print(f"Header line: {line!r}")

    print(f"Remaining body: {stream.get_contents()!r}")


def example_snapshots():
    """Example: Persist and restore a buffer."""
    print("\n=== Snapshot Example ===")

    stream = SeekableByteBuffer(b"persist me" * 50)
    stream.seek(17)

    payload = dumps(stream)
    print(f"Payload size: {len(payload)} bytes for {stream.get_size()} bytes of content")

    restored = loads(payload)
    print(f"Restored position: {restored.tell()}, identical: {bytes(restored) == bytes(stream)}")


def example_size_cap():
    """Example: Refuse to grow past a configured cap."""
    print("\n=== Size Cap Example ===")

    StreamConfig.set_defaults(max_buffer_size=1024)
    stream = SeekableByteBuffer(b"small")
    try:
        stream.seek(1_000_000)
    except ResourceFaultError as e:
        print(f"Refused: {e}")
    finally:
        StreamConfig.set_defaults(max_buffer_size=None)

    print(f"Buffer unchanged: {bytes(stream)!r}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG)

    print("stringstream Examples")
    print("=" * 50)

    example_random_access()
    example_delimited_reads()
    example_snapshots()
    example_size_cap()

    print("\n" + "=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    main()
