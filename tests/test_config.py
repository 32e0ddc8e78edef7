from __future__ import annotations

import pytest

from search_management.config import ENV_PREFIX, ManagementConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values written by load_dotenv
    for name in ("HOST", "PORT", "USE_SSL", "API_PREFIX", "TOKEN", "VERIFY_CERTS", "TIMEOUT"):
        monkeypatch.setenv(ENV_PREFIX + name, "")
        monkeypatch.delenv(ENV_PREFIX + name)


def test_load_config_env_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCH_MANAGEMENT_HOST", "eu1-api.example.com")
    monkeypatch.setenv("SEARCH_MANAGEMENT_PORT", "8443")
    monkeypatch.setenv("SEARCH_MANAGEMENT_USE_SSL", "yes")
    monkeypatch.setenv("SEARCH_MANAGEMENT_API_PREFIX", "/api/v3")
    monkeypatch.setenv("SEARCH_MANAGEMENT_TOKEN", "secret")
    monkeypatch.setenv("SEARCH_MANAGEMENT_VERIFY_CERTS", "off")
    monkeypatch.setenv("SEARCH_MANAGEMENT_TIMEOUT", "12.5")

    cfg = load_config()

    assert cfg.host == "eu1-api.example.com"
    assert cfg.port == 8443
    assert cfg.use_ssl is True
    assert cfg.token == "secret"
    assert cfg.verify_certs is False
    assert cfg.timeout == 12.5
    assert cfg.base_url == "https://eu1-api.example.com:8443/api/v3"


def test_keyword_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCH_MANAGEMENT_HOST", "from-env")

    cfg = load_config(host="from-kwargs", use_ssl=False)

    assert cfg.host == "from-kwargs"
    assert cfg.base_url == "http://from-kwargs/api/v2"


def test_env_file_is_loaded(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SEARCH_MANAGEMENT_HOST=dotenv.local\nSEARCH_MANAGEMENT_TOKEN=abc\n")

    cfg = load_config(env_path=str(env_file))

    assert cfg.host == "dotenv.local"
    assert cfg.token == "abc"


def test_invalid_bool_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCH_MANAGEMENT_USE_SSL", "maybe")
    with pytest.raises(ValueError):
        load_config()


def test_unknown_override_key_raises() -> None:
    with pytest.raises(TypeError):
        load_config(not_a_real_key=True)


def test_base_url_normalizes_prefix() -> None:
    assert ManagementConfig(host="h", api_prefix="api/v2/").base_url == "https://h/api/v2"
    assert ManagementConfig(host="h", api_prefix="").base_url == "https://h"
