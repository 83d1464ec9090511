"""
bunny_app.shared.cdn_headers

Purpose:
    Read the Bunny CDN request headers the app is willing to surface and
    derive the location greeting from the country code header.

Notes:
    - Header data is always passed in explicitly (request.headers, a dict, ...).
    - Lookups are case-insensitive. Starlette's Headers already is; plain
      mappings fall back to a scan.
    - A header sent more than once is reported once, values joined by ", ".
    - Absent headers are dropped, never reported with a null value.
    - The "not detected" fallback text belongs to the presentation layer
      (bunny_app.api.rendering); collect_known_headers returns [] in that case.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping, Optional


COUNTRY_CODE_HEADER = "cdn-requestcountrycode"

BUNNY_HEADERS: tuple[str, ...] = (
    COUNTRY_CODE_HEADER,
    "cdn-requestpullcode",
    "cdn-requestpullsuccess",
    "cdn-uid",
    "cdn-originip",
    "cdn-originalhost",
    "cdn-pullzone",
    "cdn-requestid",
)

FALLBACK_GREETING = "Hello from somewhere in the world!"


@dataclass(frozen=True)
class HeaderEntry:
    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # Repeated headers collapse to one comma-separated value, as in the Fetch API.
    getlist = getattr(headers, "getlist", None)
    if getlist is not None:
        values = getlist(name)
        return ", ".join(values) if values else None

    value = headers.get(name)
    if value is not None:
        return value

    wanted = name.lower()
    for key, candidate in headers.items():
        if key.lower() == wanted:
            return candidate
    return None


def collect_known_headers(headers: Mapping[str, str]) -> list[HeaderEntry]:
    """
    Return the allow-listed headers present on the request, in allow-list order.

    An empty string counts as present; only missing headers are dropped.
    """
    entries: list[HeaderEntry] = []
    for name in BUNNY_HEADERS:
        value = _get_header(headers, name)
        if value is not None:
            entries.append(HeaderEntry(name=name, value=value))
    return entries


def greeting_from_location(headers: Mapping[str, str]) -> str:
    country = _get_header(headers, COUNTRY_CODE_HEADER)
    if country is None:
        return FALLBACK_GREETING
    return f"Hello from {country}!"
