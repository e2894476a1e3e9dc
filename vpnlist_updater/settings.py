"""Application settings stored in a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

DEFAULT_SETTINGS_FILE = "settings.yaml"
DEFAULT_URL = "https://vpnobratno.info/russia_server_list.html"


class ProtoType(Enum):
    """Transport protocol of a server profile."""

    UDP = "UDP"
    TCP = "TCP"
    UNKNOWN = "Unknown"


@dataclass
class AppSettings:
    """Where to fetch the server list and which protocols to keep."""

    url: str
    proto_types: list[ProtoType] = field(default_factory=list)

    @classmethod
    def default(cls) -> AppSettings:
        return cls(url=DEFAULT_URL, proto_types=[ProtoType.UDP])

    def to_yaml(self) -> str:
        data = {
            "url": self.url,
            "proto_types": [proto.value for proto in self.proto_types],
        }
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, text: str) -> AppSettings:
        """Parse settings; raise ValueError when the document does not fit."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("settings must be a mapping")
        try:
            url = data["url"]
            protos = data["proto_types"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(url, str):
            raise ValueError("url must be a string")
        if not isinstance(protos, list):
            raise ValueError("proto_types must be a list")
        try:
            types = [ProtoType(proto) for proto in protos]
        except ValueError as exc:
            raise ValueError(f"unknown protocol type: {exc}") from exc
        return cls(url=url, proto_types=types)


def _is_empty(settings: AppSettings) -> bool:
    return settings.url == "" and not settings.proto_types


def create_settings_file(path, settings: AppSettings) -> bool:
    """Write settings to path; return whether it succeeded."""
    try:
        Path(path).write_text(settings.to_yaml(), encoding="utf-8")
    except OSError:
        return False
    return True


def load_settings(path=DEFAULT_SETTINGS_FILE) -> tuple[AppSettings, str]:
    """Load settings from path, creating the file with defaults if it is missing.

    Returns the settings in effect and a message describing what happened.
    """
    path = Path(path)
    if not path.exists():
        settings = AppSettings.default()
        if create_settings_file(path, settings):
            return settings, f"Создан новый файл настроек {path}"
        return settings, "Не удалось создать файл настроек"

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return AppSettings.default(), f"Ошибка чтения файла {path}"

    try:
        settings = AppSettings.from_yaml(text)
    except ValueError:
        settings = None
    if settings is None or _is_empty(settings):
        return AppSettings.default(), "Ошибка в формате файла"
    return settings, f"Настройки успешно загружены из {path}"