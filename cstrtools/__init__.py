"""C-style string routines, error messages, UTF-8 wide-string encoding and cat/grep filters."""

__version__ = "0.1.0"
__all__ = ["cat", "cstring", "errors", "grep", "textcase", "wchar"]