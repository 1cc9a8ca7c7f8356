"""Typer CLI definition for speakeasy."""

import asyncio
import logging
from dataclasses import replace

import typer

from .config import CONFIG_PATH, generate_config, load_config
from .tts.catalog import LANGUAGES, VOICES, get_random_voice
from .tts.errors import TTSError

app = typer.Typer(help="Synthesize text to speech with Gemini voices")


def process_text_input(text: str | None) -> str:
    """Return the text to synthesize.

    Raises:
        ValueError: If no text is provided
    """
    if not text:
        raise ValueError("No text provided")

    return text


def pick_voice(voice: str | None, random_voice: bool) -> str | None:
    """--random-voice overrides --voice."""
    if random_voice:
        return get_random_voice()
    return voice


@app.command()
def synthesize(
    text: str | None = typer.Argument(None, help="The text to synthesize"),
    voice: str | None = typer.Option(
        None, "-v", "--voice", help="The voice to use for synthesis"
    ),
    random_voice: bool = typer.Option(
        False, "--random-voice", help="Use a random voice. Ignores --voice."
    ),
    language: str | None = typer.Option(
        None, "-l", "--language", help="The language code (e.g., en-US)"
    ),
    output: str | None = typer.Option(
        None, "-o", "--output", help="Output file name. Defaults to an auto-generated name."
    ),
    use_cache: bool = typer.Option(
        False, "--use-cache", help="Enable caching to speed up repeated requests"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    list_voices: bool = typer.Option(
        False, "--list-voices", help="List available voices and exit"
    ),
    list_languages: bool = typer.Option(
        False, "--list-languages", help="List supported language codes and exit"
    ),
    init_config: bool = typer.Option(
        False, "--init-config", help=f"Write a default config to {CONFIG_PATH} and exit"
    ),
) -> None:
    """Synthesize text to speech and save it to a file."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")

    if list_voices:
        for v in VOICES:
            typer.echo(f"{v.name}: {v.description}")
        raise typer.Exit(0)

    if list_languages:
        for lang in LANGUAGES:
            typer.echo(f"{lang.code}: {lang.language}")
        raise typer.Exit(0)

    if init_config:
        path = generate_config()
        typer.echo(f"Config written to {path}")
        raise typer.Exit(0)

    try:
        text = process_text_input(text)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    from .tts.engine import TTSEngine

    config = load_config()
    config = replace(config, use_cache=use_cache or config.use_cache, debug=debug)
    chosen_voice = pick_voice(voice, random_voice)

    try:
        engine = TTSEngine(config)
        typer.echo(f"Synthesizing with voice: {chosen_voice or 'default'}...")
        result = asyncio.run(
            engine.synthesize_to_file(
                text=text, voice=chosen_voice, language=language, file_name=output
            )
        )
    except TTSError as e:
        if debug:
            typer.echo(f"Debug - {e.code.value}: {e!r}", err=True)
        typer.echo(f"Error: {e}", err=True)
        if e.suggestion:
            typer.echo(f"Suggestion: {e.suggestion}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        if debug:
            typer.echo(f"Debug - File system error: {e!r}", err=True)
        typer.echo(f"Error: Failed to save audio file: {e}", err=True)
        raise typer.Exit(1) from None
    except Exception as e:
        if debug:
            typer.echo(f"Debug - Unexpected error: {e!r}", err=True)
        else:
            typer.echo("Error: An unexpected error occurred", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Audio saved to: {result.file_path}")
