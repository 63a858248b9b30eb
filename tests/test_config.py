from __future__ import annotations

import os
from pathlib import Path

import pytest

from nano_banana import ClientConfig, ConfigurationError, GenerationClient


def test_load_without_any_key_has_no_credentials() -> None:
    config = ClientConfig.load(environ={}, env_files=())

    assert config.google_api_key is None
    assert config.openai_api_key is None
    assert not config.has_credentials


def test_client_requires_a_credential(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        GenerationClient(output_dir=tmp_path, environ={}, env_files=())


def test_client_constructs_with_google_key_from_environment(tmp_path: Path) -> None:
    client = GenerationClient(
        output_dir=tmp_path / "images",
        environ={"NanoBanana_ApiKey": "env-key"},
        env_files=(),
    )

    assert client.providers == ["gemini"]
    assert (tmp_path / "images").is_dir()


def test_explicit_key_beats_environment_and_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("NanoBanana_ApiKey=file-key\nOPENAI_API_KEY=file-openai\n")

    config = ClientConfig.load(
        api_key="explicit-key",
        environ={"NanoBanana_ApiKey": "env-key"},
        env_files=[env_file],
    )

    assert config.google_api_key == "explicit-key"
    assert config.openai_api_key == "file-openai"


def test_environment_beats_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("GEMINI_API_KEY=file-key\n")

    config = ClientConfig.load(
        environ={"GOOGLE_API_KEY": "env-key"},
        env_files=[env_file],
    )

    assert config.google_api_key == "env-key"


def test_first_existing_env_file_wins(tmp_path: Path) -> None:
    first = tmp_path / "first.env"
    second = tmp_path / "second.env"
    second.write_text("NanoBanana_ApiKey=second\n")

    config = ClientConfig.load(environ={}, env_files=[first, second])
    assert config.google_api_key == "second"

    first.write_text("NanoBanana_ApiKey=first\n")
    config = ClientConfig.load(environ={}, env_files=[first, second])
    assert config.google_api_key == "first"


def test_env_file_does_not_touch_process_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NanoBanana_ApiKey", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("NanoBanana_ApiKey=file-key\n")

    ClientConfig.load(env_files=[env_file])

    assert "NanoBanana_ApiKey" not in os.environ


def test_output_dir_defaults_to_temp_under_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = ClientConfig.load(environ={}, env_files=())

    assert config.output_dir == (tmp_path / "temp").resolve()
    assert config.output_dir.is_absolute()


def test_output_dir_from_environment(tmp_path: Path) -> None:
    config = ClientConfig.load(
        environ={"NANO_BANANA_OUTPUT_DIR": str(tmp_path / "custom")},
        env_files=(),
    )

    assert config.output_dir == (tmp_path / "custom").resolve()


def test_repr_hides_keys() -> None:
    config = ClientConfig(google_api_key="secret-google", openai_api_key="secret-openai")

    assert "secret" not in repr(config)


def test_get_config_hides_keys(tmp_path: Path) -> None:
    client = GenerationClient(
        api_key="secret-google", output_dir=tmp_path, environ={}, env_files=()
    )

    assert client.get_config() == {"output_dir": str(tmp_path.resolve())}


def test_direct_config_defaults_to_absolute_temp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = ClientConfig(google_api_key="k")

    assert config.output_dir.is_absolute()
    assert config.output_dir == Path.cwd() / "temp"
