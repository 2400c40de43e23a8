import pytest

from bfcore.config import DEFAULT_TAPE_SIZE, InterpreterConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BF_TAPE_SIZE", raising=False)
    monkeypatch.delenv("BF_OUTPUT", raising=False)


def test_defaults():
    config = InterpreterConfig.from_env()
    assert config.tape_size == DEFAULT_TAPE_SIZE == 30000
    assert config.output == "stdout"


def test_environment(monkeypatch):
    monkeypatch.setenv("BF_TAPE_SIZE", "64")
    monkeypatch.setenv("BF_OUTPUT", "STDERR")
    config = InterpreterConfig.from_env()
    assert config.tape_size == 64
    assert config.output == "stderr"


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("BF_TAPE_SIZE", "64")
    config = InterpreterConfig.from_env(tape_size=8, output=None)
    assert config.tape_size == 8
    assert config.output == "stdout"


def test_bad_values(monkeypatch):
    with pytest.raises(ValueError):
        InterpreterConfig(tape_size=0)
    with pytest.raises(ValueError):
        InterpreterConfig(output="printer")
    monkeypatch.setenv("BF_TAPE_SIZE", "lots")
    with pytest.raises(ValueError, match="BF_TAPE_SIZE"):
        InterpreterConfig.from_env()
