"""Pluggable logger interface and lifecycle hooks for the TTS engine."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class EngineLogger(ABC):
    """Minimal logging capability the engine writes to.

    Adapters must subclass this explicitly. Only log() and error() are
    required; warn(), info() and debug() fall back to log().
    """

    @abstractmethod
    def log(self, message: str, *args: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        self.log(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self.log(message, *args)


class StdlibLogger(EngineLogger):
    """EngineLogger backed by the standard logging module."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("speakeasy")

    def log(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)


@dataclass
class SynthesisHooks:
    """Lifecycle callbacks invoked around every synthesis.

    Attributes:
        before_synthesize: Called with the request before validation
        after_synthesize: Called with the SynthesisResult on success
        on_error: Called once with the exception on any failure
    """

    before_synthesize: Callable[[Any], None] | None = None
    after_synthesize: Callable[[Any], None] | None = None
    on_error: Callable[[Exception], None] | None = None
