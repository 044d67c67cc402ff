import pytest

from conftest import START_SCRIPT, make_support
from erllambda_release import provider

BUILD_YAML = """\
relx:
  release:
    name: myapp
    version: 0.1.0
erllambda:
  module: my_handler
"""


@pytest.fixture
def envargs(project, monkeypatch):
    monkeypatch.setattr(provider, "ERLLAMBDA_CONFIG", str(project / "build.yaml"))
    monkeypatch.setattr(provider, "ERLLAMBDA_BASE_DIR", str(project / "_build" / "default"))
    monkeypatch.setattr(provider, "ERLLAMBDA_CHECKOUTS_DIR", str(project / "_checkouts"))
    return project


def test_release(envargs):
    (envargs / "build.yaml").write_text(BUILD_YAML)
    make_support(envargs / "_checkouts")

    provider.release()

    rel = envargs / "_build" / "default" / "rel" / "myapp"
    assert (rel / "bin" / "myapp").read_bytes() == START_SCRIPT
    assert (rel / "etc" / "handler.json").read_text() == (
        '{"command": "bin/myapp", "module": "my_handler"}'
    )


def test_release_failed(envargs, caplog):
    (envargs / "build.yaml").write_text(BUILD_YAML)

    with pytest.raises(SystemExit) as e:
        provider.release()
    assert e.value.code == 1
    assert "erllambda_release: erllambda_dep_missing" in caplog.text


def test_release_config_missing(envargs):
    with pytest.raises(SystemExit) as e:
        provider.release()
    assert e.value.code == 1


def test_release_config_not_utf8(envargs, caplog):
    (envargs / "build.yaml").write_bytes(b"\xff\xfe")

    with pytest.raises(SystemExit) as e:
        provider.release()
    assert e.value.code == 1
    assert "erllambda_release: cannot load" in caplog.text
