"""Unit tests for CLI logic functions and command wiring."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from speakeasy.cli import app, pick_voice, process_text_input
from speakeasy.config import EngineConfig
from speakeasy.tts.catalog import voice_names
from speakeasy.tts.errors import InvalidVoiceError
from speakeasy.tts.models import FileResult

runner = CliRunner()


def test_process_text_input_with_valid_text() -> None:
    """Test that process_text_input returns text when provided."""
    assert process_text_input("Hello world") == "Hello world"


def test_process_text_input_with_whitespace() -> None:
    """Test that process_text_input preserves whitespace."""
    assert process_text_input("  Hello   world  ") == "  Hello   world  "


def test_process_text_input_with_multiline() -> None:
    """Test that process_text_input handles multiline text."""
    text = "Line 1\nLine 2\nLine 3"
    assert process_text_input(text) == text


@pytest.mark.parametrize("text", [None, ""])
def test_process_text_input_without_text_raises_value_error(text) -> None:
    """Test that process_text_input rejects missing text."""
    with pytest.raises(ValueError, match="No text provided"):
        process_text_input(text)


def test_pick_voice_keeps_explicit_voice() -> None:
    assert pick_voice("Kore", False) == "Kore"
    assert pick_voice(None, False) is None


def test_pick_voice_random_overrides_voice() -> None:
    assert pick_voice("Kore", True) in voice_names()


class TestListingOptions:
    """Test options that print and exit without synthesizing."""

    def test_list_voices(self) -> None:
        result = runner.invoke(app, ["--list-voices"])

        assert result.exit_code == 0
        assert "Puck: Upbeat" in result.output
        assert len(result.output.strip().splitlines()) == 30

    def test_list_languages(self) -> None:
        result = runner.invoke(app, ["--list-languages"])

        assert result.exit_code == 0
        assert "en-US: English (US)" in result.output

    def test_init_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--init-config"])

        assert result.exit_code == 0
        assert (tmp_path / "config.toml").exists()


class TestSynthesizeCommand:
    """Test the synthesize command with a mocked engine."""

    @pytest.fixture
    def engine(self, tmp_path: Path):
        config = EngineConfig(api_key="k", output_dir=tmp_path)
        with patch("speakeasy.cli.load_config", return_value=config), patch(
            "speakeasy.tts.engine.TTSEngine"
        ) as mock_engine_class:
            engine = MagicMock()
            engine.synthesize_to_file = AsyncMock(
                return_value=FileResult(tmp_path / "hello.mp3", "Puck", "en-US")
            )
            mock_engine_class.return_value = engine
            yield mock_engine_class

    def test_success_prints_path(self, engine, tmp_path: Path) -> None:
        result = runner.invoke(app, ["Hello world", "-v", "Puck", "-l", "en-US"])

        assert result.exit_code == 0
        assert "Synthesizing with voice: Puck" in result.output
        assert f"Audio saved to: {tmp_path / 'hello.mp3'}" in result.output
        engine.return_value.synthesize_to_file.assert_awaited_once_with(
            text="Hello world", voice="Puck", language="en-US", file_name=None
        )

    def test_output_and_cache_flags(self, engine) -> None:
        result = runner.invoke(app, ["Hi", "-o", "greeting", "--use-cache"])

        assert result.exit_code == 0
        config = engine.call_args.args[0]
        assert config.use_cache is True
        kwargs = engine.return_value.synthesize_to_file.call_args.kwargs
        assert kwargs["file_name"] == "greeting"

    def test_missing_text_fails(self, engine) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "No text provided" in result.output
        engine.assert_not_called()

    def test_tts_error_shows_suggestion(self, engine) -> None:
        engine.return_value.synthesize_to_file.side_effect = InvalidVoiceError(
            "Voice 'puc' is not supported.", suggestion="Did you mean 'Puck'?"
        )

        result = runner.invoke(app, ["Hi", "-v", "puc"])

        assert result.exit_code == 1
        assert "Error: Voice 'puc' is not supported." in result.output
        assert "Suggestion: Did you mean 'Puck'?" in result.output

    def test_unexpected_error_hidden_without_debug(self, engine) -> None:
        engine.return_value.synthesize_to_file.side_effect = ZeroDivisionError()

        result = runner.invoke(app, ["Hi"])

        assert result.exit_code == 1
        assert "An unexpected error occurred" in result.output

    def test_os_error(self, engine) -> None:
        engine.return_value.synthesize_to_file.side_effect = PermissionError("denied")

        result = runner.invoke(app, ["Hi"])

        assert result.exit_code == 1
        assert "Failed to save audio file" in result.output
