"""Kernel time – Clock port + implementations."""
from easy_export.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
