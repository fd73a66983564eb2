import pytest

from pipereq.bootstrap.config.loader import CONFIG_ENV
from pipereq.core.codec import RequestCodec
from pipereq.infra.json_serializer import JsonSerializer
from pipereq.infra.yaml_serializer import YamlSerializer
from tests.fake.fake_serializer import FakeSerializer


@pytest.fixture
def fake_serializer():
    return FakeSerializer()


@pytest.fixture
def json_codec() -> RequestCodec:
    return RequestCodec(JsonSerializer())


@pytest.fixture
def yaml_codec() -> RequestCodec:
    return RequestCodec(YamlSerializer())


@pytest.fixture(params=["json", "yaml"])
def codec(request) -> RequestCodec:
    serializer = JsonSerializer() if request.param == "json" else YamlSerializer()
    return RequestCodec(serializer)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Isolate settings from the developer's environment: no PIPEREQ_*
    variables, no config file, and a working directory without pipereq.yaml.
    """
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    for key in ("PIPEREQ_CODEC__FORMAT", "PIPEREQ_CODEC__INDENT", "PIPEREQ_CODEC__SORT_KEYS",
                "PIPEREQ_CODEC__STRICT", "PIPEREQ_LOG__LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
