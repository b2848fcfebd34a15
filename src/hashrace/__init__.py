"""hashrace - benchmark the throughput of file hashing algorithms."""

__version__ = "0.1.0"
