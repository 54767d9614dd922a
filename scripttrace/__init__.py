"""Process-wide pluggable logging and tracing hooks for script engine hosts."""

__version__ = "0.1.0"
__all__ = ["utils"]