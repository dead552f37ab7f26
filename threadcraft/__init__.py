"""Joining threads, a parallel accumulator, thread demos and argument checks."""

__version__ = "0.1.0"
__all__ = ["basic", "thread_owner", "utils"]