import pytest

from vpnlist_updater.settings import (
    AppSettings,
    ProtoType,
    create_settings_file,
    load_settings,
)


def test_default_settings():
    settings = AppSettings.default()
    assert settings.url == "https://vpnobratno.info/russia_server_list.html"
    assert settings.proto_types == [ProtoType.UDP]


def test_default_yaml_text():
    expected = (
        "url: https://vpnobratno.info/russia_server_list.html\n"
        "proto_types:\n"
        "- UDP\n"
    )
    assert AppSettings.default().to_yaml() == expected


@pytest.mark.parametrize(
    "types",
    [[], [ProtoType.UDP, ProtoType.TCP], [ProtoType.UNKNOWN, ProtoType.TCP]],
)
def test_yaml_round_trip(types):
    settings = AppSettings(url="https://domain.app.html", proto_types=types)
    assert AppSettings.from_yaml(settings.to_yaml()) == settings


def test_unknown_variant_name():
    settings = AppSettings.from_yaml("url: a\nproto_types:\n- Unknown\n")
    assert settings.proto_types == [ProtoType.UNKNOWN]


@pytest.mark.parametrize(
    "text",
    [
        "url: [unclosed",
        "- just\n- a list\n",
        "url: https://domain.app.html\n",
        "proto_types:\n- UDP\n",
        "url: https://domain.app.html\nproto_types:\n- QUIC\n",
        "url: https://domain.app.html\nproto_types: UDP\n",
        "url: [1, 2]\nproto_types: []\n",
    ],
)
def test_from_yaml_rejects_bad_documents(text):
    with pytest.raises(ValueError):
        AppSettings.from_yaml(text)


def test_load_creates_missing_file(tmp_path):
    path = tmp_path / "settings.yaml"
    settings, message = load_settings(path)
    assert settings == AppSettings.default()
    assert message == f"Создан новый файл настроек {path}"
    assert AppSettings.from_yaml(path.read_text(encoding="utf-8")) == settings


def test_load_reports_failed_creation(tmp_path):
    path = tmp_path / "missing_dir" / "settings.yaml"
    settings, message = load_settings(path)
    assert settings == AppSettings.default()
    assert message == "Не удалось создать файл настроек"
    assert not path.exists()


def test_load_existing_file(tmp_path):
    path = tmp_path / "settings.yaml"
    stored = AppSettings(url="https://domain.app.html", proto_types=[ProtoType.UDP, ProtoType.TCP])
    assert create_settings_file(path, stored)
    settings, message = load_settings(path)
    assert settings == stored
    assert message == f"Настройки успешно загружены из {path}"


@pytest.mark.parametrize("text", ["not: [valid", "url: ''\nproto_types: []\n"])
def test_load_bad_format_falls_back(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    settings, message = load_settings(path)
    assert settings == AppSettings.default()
    assert message == "Ошибка в формате файла"


def test_load_unreadable_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_bytes(b"\xff\xfe\xfa")
    settings, message = load_settings(path)
    assert settings == AppSettings.default()
    assert message == f"Ошибка чтения файла {path}"


def test_create_settings_file_failure(tmp_path):
    assert create_settings_file(tmp_path / "no" / "x.yaml", AppSettings.default()) is False