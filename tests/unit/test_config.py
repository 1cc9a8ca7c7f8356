"""Unit tests for configuration loading and EngineConfig."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from speakeasy import config as config_module
from speakeasy.config import DEFAULT_CONFIG, EngineConfig, generate_config, load_config
from speakeasy.tts.hooks import StdlibLogger


class TestEngineConfig:
    """Test EngineConfig normalization."""

    def test_defaults(self) -> None:
        config = EngineConfig()

        assert config.default_voice is None
        assert config.default_language == "en-US"
        assert config.output_dir == Path("data/tts")
        assert config.resolved_cache_dir == Path("data/tts/cache")
        assert config.use_cache is False

    def test_paths_normalized(self) -> None:
        config = EngineConfig(output_dir="out", cache_dir="elsewhere")

        assert config.output_dir == Path("out")
        assert config.resolved_cache_dir == Path("elsewhere")

    def test_logger_must_be_adapter(self) -> None:
        with pytest.raises(TypeError, match="EngineLogger"):
            EngineConfig(logger=object())

    def test_adapter_accepted(self) -> None:
        logger = StdlibLogger()
        assert EngineConfig(logger=logger).logger is logger


class TestLoadConfig:
    """Test the file < env < explicit precedence chain."""

    def test_missing_file_uses_defaults(self) -> None:
        config = load_config()

        assert config.default_language == "en-US"
        assert config.model == "gemini-2.5-pro-preview-tts"
        assert config.ffmpeg_path == "ffmpeg"

    def test_file_values(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text(
            '[tts]\nvoice = "Kore"\nlanguage = "de-DE"\n'
            '[output]\ndir = "audio"\n'
            '[cache]\nenabled = true\ndir = "c"\n'
            '[ffmpeg]\npath = "/opt/ffmpeg"\n'
        )

        config = load_config(path)

        assert config.default_voice == "Kore"
        assert config.default_language == "de-DE"
        assert config.output_dir == Path("audio")
        assert config.cache_dir == Path("c")
        assert config.use_cache is True
        assert config.ffmpeg_path == "/opt/ffmpeg"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[tts]\nvoice = "Kore"\n[output]\ndir = "audio"\n')
        monkeypatch.setenv("SPEAKEASY_VOICE", "Puck")
        monkeypatch.setenv("SPEAKEASY_OUTPUT_DIR", "/tmp/elsewhere")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        config = load_config(path)

        assert config.default_voice == "Puck"
        assert config.output_dir == Path("/tmp/elsewhere")
        assert config.api_key == "env-key"

    def test_invalid_toml_exits(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[tts\nvoice = ")

        with pytest.raises(SystemExit) as exc_info:
            load_config(path)

        assert exc_info.value.code == 1
        assert "Invalid config file" in capsys.readouterr().err

    def test_default_path_is_config_path(self, tmp_path: Path) -> None:
        config_module.CONFIG_PATH.write_text('[tts]\nlanguage = "ja-JP"\n')

        assert load_config().default_language == "ja-JP"


class TestGenerateConfig:
    def test_writes_default_config(self, tmp_path: Path) -> None:
        path = generate_config(tmp_path / "nested" / "config.toml")

        assert path.read_text() == DEFAULT_CONFIG

    def test_generated_config_loads(self, tmp_path: Path) -> None:
        path = generate_config(tmp_path / "config.toml")

        config = load_config(path)

        assert config.default_voice is None
        assert config.default_language == "en-US"
        assert config.use_cache is False
