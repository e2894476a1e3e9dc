"""Command line entry point: fetch the server list and save profiles."""

from __future__ import annotations

import argparse
import asyncio
import itertools
import os
import select
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

import httpx

from .listing import parse_body
from .network import DownloadError, fetch_raw_data, save_to_file
from .settings import DEFAULT_SETTINGS_FILE, ProtoType, load_settings

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

DEFAULT_WAIT_SECONDS = 15

_SPINNER = [
    "-", "\\", "|", "/",
    "- н       c      ч     з",
    "\\ на      ct     чт    за",
    "| наж     ctr    что   зак",
    "/ нажм    ctrl   чтоб  закр",
    "- нажми   ctrl+  чтобы закры",
    "\\ нажмит  ctrl+c чтобы закрыт",
    "| нажмите ctrl+c чтобы закрыть",
    "/ нажмите ctrl+c чтобы закрыть",
    "- нажмите ctrl+c чтобы закрыть",
    "\\ нажмите ctrl+c чтобы закрыть",
    "| нажмите ctrl+c чтобы закрыть",
    "/ нажмите ctrl+c чтобы закрыть",
    "- нажмите ctrl+c чтобы закрыть",
    "\\  ажмите  trl+c  тобы  акрыть",
    "|   жмите   rl+c   обы   крыть",
    "/    мите    l+c    бы    рыть",
    "-     ите     +c     ы     ыть",
    "\\      те      c            ть",
    "|       е                    ь",
    "/                              ",
    *(["-", "\\", "|", "/"] * 6),
]


class Outcome(Enum):
    """Result of downloading one profile."""

    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


def select_urls(servers: Iterable[tuple[ProtoType, str]], proto_types: Iterable[ProtoType]) -> list[str]:
    """Keep the urls of servers whose protocol is among proto_types."""
    wanted = set(proto_types)
    return [url for proto, url in servers if proto in wanted]


async def _download_one(url: str, client: Optional[httpx.AsyncClient], directory) -> Outcome:
    print(f"Start saving from {url}")
    try:
        name, existed = await save_to_file(url, client, directory)
    except DownloadError as exc:
        print(f"Ошибка: {exc}")
        return Outcome.FAILED
    if existed:
        print(f"Обновлено: {name}")
        return Outcome.UPDATED
    print(f"Создано: {name}")
    return Outcome.CREATED


async def download_all(urls: Iterable[str], client: Optional[httpx.AsyncClient] = None, directory=".") -> list[Outcome]:
    """Download all urls concurrently and report the outcome of each."""
    return list(await asyncio.gather(*(_download_one(url, client, directory) for url in urls)))


class _KeyWatcher:
    """Notices a key press on the controlling terminal, if there is one."""

    def __init__(self) -> None:
        self._fd: Optional[int] = None
        self._saved = None
        self._pressed = False

    def __enter__(self) -> _KeyWatcher:
        try:
            interactive = sys.stdin is not None and sys.stdin.isatty()
            fd = sys.stdin.fileno() if interactive else None
        except (AttributeError, ValueError, OSError):
            interactive, fd = False, None
        if not interactive:
            return self
        self._fd = fd
        if termios is not None and os.name != "nt":
            try:
                self._saved = termios.tcgetattr(fd)
                tty.setcbreak(fd)
            except termios.error:
                self._saved = None
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def pressed(self) -> bool:
        if self._pressed or self._fd is None:
            return self._pressed
        if msvcrt is not None:
            if msvcrt.kbhit():
                msvcrt.getch()
                self._pressed = True
        else:
            ready, _, _ = select.select([self._fd], [], [], 0)
            if ready:
                os.read(self._fd, 1)
                self._pressed = True
        return self._pressed


async def finish(seconds: int = DEFAULT_WAIT_SECONDS) -> None:
    """Count down before exiting; a key press turns the wait into an endless spinner."""
    print(f"Выполнение программы будет завершено через {seconds} секунд ", end="")
    print("Нажмите любую клавишу, чтобы отменить завершение ", end="", flush=True)

    with _KeyWatcher() as keys:
        for _ in range(seconds):
            await asyncio.sleep(0.999)
            if keys.pressed():
                break
            print(".", end="", flush=True)
        cancelled = keys.pressed()

    if cancelled:
        print("\nЗавершение отменено пользователем")
        for marker in itertools.cycle(_SPINNER):
            await asyncio.sleep(0.2)
            print(f"\r{marker}", end="", flush=True)
    print()


async def _run(settings_path, directory, wait: int) -> None:
    settings, message = load_settings(settings_path)
    print(message)
    print(settings.to_yaml())

    async with httpx.AsyncClient(follow_redirects=True) as client:
        print(f"Выполняется подключение к {settings.url}")
        try:
            body = await fetch_raw_data(settings.url, client)
        except DownloadError as exc:
            print(exc)
            await finish(wait)
            return
        print(f"Получен ответ размером {len(body.encode('utf-8'))} байт")

        servers = parse_body(body)
        print(f"Всего серверов найдено - {len(servers)}")

        urls = select_urls(servers, settings.proto_types)
        print(f"Из них удовлетворяют настройкам - {len(urls)}")

        if urls:
            outcomes = await download_all(urls, client, directory)
            created = outcomes.count(Outcome.CREATED)
            updated = outcomes.count(Outcome.UPDATED)
            print(f"Итого: создано - {created}, обновлено - {updated}")

    await finish(wait)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Download VPN profiles listed on a web page.")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_FILE, help="settings file")
    parser.add_argument("--output-dir", default=".", help="where to save profiles")
    parser.add_argument(
        "--wait", type=int, default=DEFAULT_WAIT_SECONDS, help="seconds to wait before exiting"
    )
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run(Path(args.settings), Path(args.output_dir), args.wait))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())