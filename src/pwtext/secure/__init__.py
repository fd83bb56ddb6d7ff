# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/secure/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Secure buffers: storage that is zeroed before it is released."""

from __future__ import annotations

from pwtext.secure.allocators import Allocator, HeapAllocator, LockedAllocator
from pwtext.secure.buffer import SecureBuffer

__all__ = [
    "Allocator",
    "HeapAllocator",
    "LockedAllocator",
    "SecureBuffer",
]
