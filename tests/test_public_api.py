# topmark:header:start
#
#   project      : PwText
#   file         : test_public_api.py
#   file_relpath : tests/test_public_api.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Smoke test for the names re-exported by the top-level `pwtext` package."""

from __future__ import annotations

import pwtext
from pwtext.errors import PwTextError


def test_all_exports_resolve() -> None:
    for name in pwtext.__all__:
        assert getattr(pwtext, name) is not None, name


def test_error_hierarchy() -> None:
    for exc in (
        pwtext.InvalidEncoding,
        pwtext.EncodingError,
        pwtext.DecodingError,
        pwtext.FormatError,
    ):
        assert issubclass(exc, PwTextError)
        assert issubclass(exc, ValueError)
