"""Extraction of server links from an HTML listing page."""

from __future__ import annotations

from typing import Optional

from .settings import ProtoType

_OPENING = '<a href="'
_CLOSING = "</a>"


def find_next(source: str, index: int) -> Optional[tuple[ProtoType, str, int]]:
    """Find the next anchor at or after index.

    Returns the protocol named in the link text, the link target and the
    index just past the closing tag, or None when no complete anchor remains.
    """
    if index < 0 or index > len(source):
        return None

    start = source.find(_OPENING, index)
    if start < 0:
        return None
    url_start = start + len(_OPENING)

    url_end = source.find('"', url_start)
    if url_end < 0:
        return None
    url = source[url_start:url_end]

    tag_end = source.find(">", url_end)
    if tag_end < 0:
        return None
    text_start = tag_end + 1

    text_end = source.find(_CLOSING, text_start)
    if text_end < 0:
        return None

    text = source[text_start:text_end].upper()
    end_index = text_end + len(_CLOSING)

    if "UDP" in text:
        proto = ProtoType.UDP
    elif "TCP" in text:
        proto = ProtoType.TCP
    else:
        proto = ProtoType.UNKNOWN
    return proto, url, end_index


def parse_body(source: str) -> list[tuple[ProtoType, str]]:
    """Return every (protocol, url) pair found in the page, in order."""
    servers = []
    index = 0
    while (found := find_next(source, index)) is not None:
        proto, url, index = found
        servers.append((proto, url))
    return servers