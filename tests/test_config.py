import pytest

from core.config import API_KEY_KEY, DOMAIN_KEY, AppSettings, EnvFileStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DOMAIN", "GAIA_API_KEY", "QUESTIONS_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize("order", [(DOMAIN_KEY, API_KEY_KEY), (API_KEY_KEY, DOMAIN_KEY)])
def test_store_round_trip_keeps_unrelated_keys(tmp_path, order):
    path = tmp_path / ".env"
    path.write_text("# my settings\nOTHER=keep-me\n\nLOG_LEVEL=DEBUG\n", encoding="utf-8")
    values = {DOMAIN_KEY: "foo", API_KEY_KEY: "bar"}

    store = EnvFileStore(path)
    for key in order:
        store.set(key, values[key])

    reloaded = EnvFileStore(path)
    assert reloaded.get(DOMAIN_KEY) == "foo"
    assert reloaded.get(API_KEY_KEY) == "bar"
    assert reloaded.get("OTHER") == "keep-me"
    assert reloaded.get("LOG_LEVEL") == "DEBUG"
    assert path.read_text(encoding="utf-8").startswith("# my settings\nOTHER=keep-me\n\nLOG_LEVEL=DEBUG\n")


def test_set_replaces_in_place(tmp_path):
    path = tmp_path / ".env"
    path.write_text("DOMAIN=old\nGAIA_API_KEY=k\n", encoding="utf-8")

    EnvFileStore(path).set(DOMAIN_KEY, "new")

    assert path.read_text(encoding="utf-8") == "DOMAIN=new\nGAIA_API_KEY=k\n"


def test_set_creates_missing_file(tmp_path):
    path = tmp_path / "nested" / ".env"

    EnvFileStore(path).set(API_KEY_KEY, "secret")

    assert path.read_text(encoding="utf-8") == "GAIA_API_KEY=secret\n"


def test_empty_value_reads_as_unset(tmp_path):
    store = EnvFileStore(tmp_path / ".env")
    store.set(DOMAIN_KEY, "node")
    store.set(DOMAIN_KEY, "")

    assert store.get(DOMAIN_KEY) is None
    assert (tmp_path / ".env").read_text(encoding="utf-8") == "DOMAIN=\n"


def test_get_missing_file(tmp_path):
    assert EnvFileStore(tmp_path / ".env").get(DOMAIN_KEY) is None


def test_similar_key_prefix_is_not_touched(tmp_path):
    path = tmp_path / ".env"
    path.write_text("DOMAIN_ALIAS=x\n", encoding="utf-8")

    EnvFileStore(path).set(DOMAIN_KEY, "y")

    assert EnvFileStore(path).values() == {"DOMAIN_ALIAS": "x", "DOMAIN": "y"}


def test_settings_defaults(tmp_path):
    settings = AppSettings(_env_file=tmp_path / "missing.env")

    assert settings.domain == ""
    assert settings.gaia_api_key == ""
    assert settings.default_interval_seconds == 3
    assert settings.endpoint_template == "https://{domain}.gaia.domains/v1/chat/completions"


def test_settings_fall_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DOMAIN", "env-node")
    monkeypatch.setenv("GAIA_API_KEY", "env-key")

    settings = AppSettings(_env_file=tmp_path / "missing.env")

    assert settings.domain == "env-node"
    assert settings.gaia_api_key == "env-key"


def test_env_file_takes_precedence_over_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("DOMAIN=file-node\n", encoding="utf-8")
    monkeypatch.setenv("DOMAIN", "env-node")
    monkeypatch.setenv("GAIA_API_KEY", "env-key")

    settings = AppSettings(_env_file=env_file)

    assert settings.domain == "file-node"
    assert settings.gaia_api_key == "env-key"


def test_persisted_unset_domain_wins_over_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    EnvFileStore(env_file).set(DOMAIN_KEY, "")
    monkeypatch.setenv("DOMAIN", "env-node")

    assert AppSettings(_env_file=env_file).domain == ""


@pytest.mark.parametrize("value", ["abc #1", "two words", 'say "hi"', "back\\slash", "it's"])
def test_values_with_comment_or_quote_characters_survive_restart(tmp_path, value):
    env_file = tmp_path / ".env"
    EnvFileStore(env_file).set(DOMAIN_KEY, value)
    EnvFileStore(env_file).set(API_KEY_KEY, value)

    assert EnvFileStore(env_file).get(DOMAIN_KEY) == value
    settings = AppSettings(_env_file=env_file)
    assert settings.domain == value
    assert settings.gaia_api_key == value


def test_plain_values_are_written_unquoted(tmp_path):
    env_file = tmp_path / ".env"
    EnvFileStore(env_file).set(API_KEY_KEY, "gaia-abc123")

    assert env_file.read_text(encoding="utf-8") == "GAIA_API_KEY=gaia-abc123\n"
