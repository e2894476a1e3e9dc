"""Downloading the server list and individual profile files."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

import httpx


class DownloadError(Exception):
    """A page or file could not be downloaded or saved."""


@asynccontextmanager
async def _client_scope(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(follow_redirects=True) as own:
        yield own


def _is_visible_ascii(value: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def name_from_content_disposition(value: str) -> Optional[str]:
    """Take the quoted file name from a Content-Disposition value, if any."""
    for part in value.split(";"):
        if "filename=" in part:
            pieces = part.split('"')
            if len(pieces) >= 2:
                return pieces[1]
    return None


def name_from_url(url: str) -> str:
    """Build a profile file name from the alphanumeric characters of url."""
    return "".join(ch for ch in url if ch.isalnum()) + ".ovpn"


async def fetch_raw_data(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Return the body of url as text."""
    async with _client_scope(client) as http:
        try:
            response = await http.get(url)
        except httpx.HTTPError as exc:
            raise DownloadError(str(exc)) from exc
    return response.text


async def save_to_file(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    directory=".",
) -> tuple[str, bool]:
    """Download url into directory.

    Returns the file name and whether a file of that name already existed.
    """
    async with _client_scope(client) as http:
        try:
            response = await http.get(url)
        except httpx.HTTPError as exc:
            raise DownloadError(f"Ошибка скачивания файла. {exc}") from exc

    name = None
    disposition = response.headers.get("content-disposition")
    if disposition is not None and _is_visible_ascii(disposition):
        name = name_from_content_disposition(disposition)
    if name is None:
        name = name_from_url(url)

    path = Path(directory) / name
    existed = path.exists()
    try:
        path.write_bytes(response.content)
    except OSError as exc:
        raise DownloadError(f"Ошибка записи файла. {exc}") from exc
    return name, existed