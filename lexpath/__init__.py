"""Lexical POSIX-style paths, portable name checks, unique path names and whole-file helpers."""

__version__ = "0.1.0"

__all__ = ["encoding", "portability", "elements", "path", "unique", "stringfile"]