"""PID loops, encoder capture, pendant packets, board detection and RP1 GPIO registers."""

__version__ = "0.1.0"