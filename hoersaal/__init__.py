"""Course exercises: student lists, a lending library and shortest paths."""

__version__ = "0.1.0"