"""Memory monitoring and allocation checks for stream buffers."""

import time
import logging
import psutil
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass
from abc import ABC, abstractmethod

from stringstream.config import config
from stringstream.exceptions import ResourceFaultError

logger = logging.getLogger(__name__)


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value


@dataclass
class MemoryInfo:
    """Memory usage information."""
    total: int
    available: int
    used: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% of {config.format_bytes(self.total)} used, "
                f"{config.format_bytes(self.available)} available, "
                f"pressure {self.pressure_level.name}")


class MemoryPressureHandler(ABC):
    """Abstract base class for memory pressure handlers."""

    @abstractmethod
    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        """Check if this handler should handle the given pressure level."""
        pass

    @abstractmethod
    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        """Handle memory pressure."""
        pass


class MemoryMonitor:
    """Inspect system memory before a buffer grows."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None to follow config)
        """
        self._memory_limit = memory_limit
        self.handlers: List[MemoryPressureHandler] = []

    @property
    def memory_limit(self) -> int:
        return self._memory_limit or config.memory_limit

    def add_handler(self, handler: MemoryPressureHandler) -> None:
        """Add a memory pressure handler."""
        self.handlers.append(handler)

    def remove_handler(self, handler: MemoryPressureHandler) -> None:
        """Remove a memory pressure handler."""
        if handler in self.handlers:
            self.handlers.remove(handler)

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        mem = psutil.virtual_memory()

        # Use configured limit if lower than system memory
        total = min(mem.total, self.memory_limit)
        used = mem.used
        available = max(0, min(mem.available, total - used))
        percent = min(100.0, (used / total) * 100) if total else 100.0

        if percent >= 95:
            level = MemoryPressureLevel.CRITICAL
        elif percent >= 85:
            level = MemoryPressureLevel.HIGH
        elif percent >= 70:
            level = MemoryPressureLevel.MEDIUM
        elif percent >= 50:
            level = MemoryPressureLevel.LOW
        else:
            level = MemoryPressureLevel.NONE

        return MemoryInfo(
            total=total,
            available=available,
            used=used,
            percent=percent,
            pressure_level=level,
            timestamp=time.time()
        )

    def check_memory_pressure(self) -> MemoryInfo:
        """Sample memory and notify handlers."""
        info = self.get_memory_info()

        for handler in self.handlers:
            if handler.can_handle(info.pressure_level, info):
                try:
                    handler.handle(info.pressure_level, info)
                except Exception:
                    # A broken handler must not block the allocation check
                    logger.exception("Memory pressure handler %r failed", handler)

        return info

    def ensure_capacity(self, new_size: int, growth: int, operation: Optional[str] = None) -> None:
        """
        Verify that a store may grow to `new_size` bytes.

        Args:
            new_size: Store length after the growth
            growth: Number of bytes being added
            operation: Stream operation requesting the growth, for error reports

        Raises:
            ResourceFaultError: If the size cap or available memory would be exceeded
        """
        if growth <= 0:
            return

        if not config.check_size(new_size):
            raise ResourceFaultError(
                f"buffer of {config.format_bytes(new_size)} exceeds max_buffer_size "
                f"of {config.format_bytes(config.max_buffer_size)}",
                requested=new_size, growth=growth, operation=operation)

        # Small allocations are not worth a psutil round-trip
        if growth < config.memory_check_threshold:
            return

        info = self.check_memory_pressure()
        if info.available < growth:
            raise ResourceFaultError(
                f"cannot allocate {config.format_bytes(growth)}: only "
                f"{config.format_bytes(info.available)} available",
                requested=new_size, growth=growth, operation=operation)


# Global monitor instance
monitor = MemoryMonitor()
