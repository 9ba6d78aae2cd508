"""Memory monitoring and pressure handling for stream buffers."""

from stringstream.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    MemoryPressureHandler,
    monitor,
)
from stringstream.memory.handlers import LoggingHandler

# Pressure seen during large allocations is logged by default
monitor.add_handler(LoggingHandler())

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "MemoryPressureHandler",
    "LoggingHandler",
    "monitor",
]
