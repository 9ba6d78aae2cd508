"""
Configuration management for in-memory streams.
"""

from typing import Optional
from dataclasses import dataclass, field
import psutil


@dataclass
class StreamConfig:
    """Global configuration for stream buffers."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))
    max_buffer_size: Optional[int] = None  # None means bounded only by memory
    memory_check_threshold: int = 1024 * 1024  # Consult the monitor for growth >= 1MB

    # Snapshots
    snapshot_compression: bool = True
    compression_level: int = 6

    _instance: Optional['StreamConfig'] = None

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    def check_size(self, size: int) -> bool:
        """Return True if a store of `size` bytes fits under max_buffer_size."""
        return self.max_buffer_size is None or size <= self.max_buffer_size

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


# Global configuration instance
config = StreamConfig.get_instance()
