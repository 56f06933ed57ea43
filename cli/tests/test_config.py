from twitch_cli import config


def _use_tmp_config(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (config.ENV_APP_ID, config.ENV_APP_SECRET, config.ENV_API_BASE_URL, config.ENV_TIMEOUT_S):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)

    cfg = config.load_config()

    assert cfg.app_id == ""
    assert cfg.api_base_url == "https://api.twitch.tv/helix/"
    assert cfg.token_url == "https://id.twitch.tv/oauth2/token"
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    cfg = config.default_config()
    cfg.app_id = "id"
    cfg.app_secret = "secret"
    cfg.auth.access_token = "access"
    cfg.auth.refresh_token = "refresh"

    path = config.save_config(cfg)
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert loaded.app_id == "id"
    assert loaded.app_secret == "secret"
    assert loaded.auth.access_token == "access"
    assert loaded.auth.refresh_token == "refresh"


def test_env_overrides_file_values(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(['app_id = "from-file"', 'app_secret = "file-secret"', 'timeout_s = 20.0', ""]),
        encoding="utf-8",
    )
    monkeypatch.setenv(config.ENV_APP_ID, "from-env")
    monkeypatch.setenv(config.ENV_TIMEOUT_S, "3")

    cfg = config.load_config()

    assert cfg.app_id == "from-env"
    assert cfg.app_secret == "file-secret"
    assert cfg.timeout_s == 3.0
    assert config.load_config(use_env=False).app_id == "from-file"


def test_invalid_timeout_falls_back_to_default(tmp_path, monkeypatch) -> None:
    _use_tmp_config(monkeypatch, tmp_path)
    tmp_path.joinpath("config.toml").write_text('timeout_s = "soon"\n', encoding="utf-8")

    assert config.load_config().timeout_s == config.DEFAULT_TIMEOUT_S


def test_normalize_base_url_keeps_one_trailing_slash() -> None:
    assert config.normalize_base_url("https://api.twitch.tv/helix") == "https://api.twitch.tv/helix/"
    assert config.normalize_base_url("https://api.twitch.tv/helix//") == "https://api.twitch.tv/helix/"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("mock.example.test/helix") == "https://mock.example.test/helix/"


def test_normalize_base_url_empty_uses_helix() -> None:
    assert config.normalize_base_url("") == "https://api.twitch.tv/helix/"
