"""
URL-encoded form / query string source.

Parses ``application/x-www-form-urlencoded`` bodies with
``urllib.parse.parse_qsl``. Blank values are kept so that ``a=`` yields
``[""]`` (present but empty) rather than dropping the key. Undecodable
bytes become U+FFFD, matching how bad percent-escapes are decoded.
"""

from __future__ import annotations

from urllib.parse import parse_qsl

from form_binding.adapters.map_adapter import MultiMapSource


class FormSource(MultiMapSource):
    """Multi-valued source built from an encoded form body or query string."""

    @classmethod
    def from_urlencoded(cls, body: str | bytes, encoding: str = "utf-8") -> "FormSource":
        if isinstance(body, bytes):
            body = body.decode(encoding, errors="replace")
        body = body.removeprefix("?")
        pairs = parse_qsl(body, keep_blank_values=True, encoding=encoding)
        return cls.from_pairs(pairs)
