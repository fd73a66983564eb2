import pytest
import yaml

from pipereq.bootstrap.config.loader import CONFIG_ENV, get_configfile
from pipereq.bootstrap.config.settings import PipereqConfig


@pytest.mark.ut
def test_defaults(clean_env):
    config = PipereqConfig()

    assert config.codec.format == "json"
    assert config.codec.indent is None
    assert config.codec.sort_keys is False
    assert config.codec.strict is False
    assert config.log.level == "WARNING"


@pytest.mark.ut
def test_no_configfile_by_default(clean_env):
    assert get_configfile() is None


@pytest.mark.ut
def test_default_configfile_in_cwd(clean_env):
    file = clean_env / "pipereq.yaml"
    file.write_text(yaml.safe_dump({"codec": {"format": "yaml", "strict": True}}))

    assert get_configfile().resolve() == file.resolve()

    config = PipereqConfig()
    assert config.codec.format == "yaml"
    assert config.codec.strict is True
    assert config.codec.indent is None


@pytest.mark.ut
def test_configfile_from_env(clean_env, monkeypatch, tmp_path_factory):
    file = tmp_path_factory.mktemp("conf") / "custom.yaml"
    file.write_text(yaml.safe_dump({"codec": {"indent": 2}, "log": {"level": "DEBUG"}}))
    monkeypatch.setenv(CONFIG_ENV, str(file))

    config = PipereqConfig()
    assert config.codec.indent == 2
    assert config.log.level == "DEBUG"


@pytest.mark.ut
def test_missing_explicit_configfile(clean_env, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(clean_env / "missing.yaml"))

    with pytest.raises(SystemExit, match="Configuration file not found"):
        get_configfile()


@pytest.mark.ut
def test_env_overrides_file(clean_env, monkeypatch):
    (clean_env / "pipereq.yaml").write_text(
        yaml.safe_dump({"codec": {"format": "yaml", "sort_keys": True}})
    )
    monkeypatch.setenv("PIPEREQ_CODEC__FORMAT", "json")

    config = PipereqConfig()
    assert config.codec.format == "json"
    assert config.codec.sort_keys is True


@pytest.mark.ut
def test_init_overrides_env(clean_env, monkeypatch):
    monkeypatch.setenv("PIPEREQ_CODEC__FORMAT", "yaml")
    monkeypatch.setenv("PIPEREQ_CODEC__STRICT", "true")

    config = PipereqConfig(codec={"format": "json"})
    assert config.codec.format == "json"
    assert config.codec.strict is True
