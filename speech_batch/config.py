from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from speech_batch.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    ENV_DESTINATION_CONTAINER_URL,
    ENV_HTTP_TIMEOUT,
    ENV_LOG_LEVEL,
    ENV_SPEECH_ENDPOINT,
    ENV_SPEECH_KEY,
)
from speech_batch.errors import ConfigurationError


@dataclass(frozen=True)
class Config:
    speech_endpoint: str
    speech_key: str
    destination_container_url: str
    log_level: str = DEFAULT_LOG_LEVEL
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT

    @property
    def transcriptions_base(self) -> str:
        return self.speech_endpoint.rstrip("/")

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()
        return cls.from_mapping(os.environ)

    @classmethod
    def from_mapping(cls, source: Mapping[str, Optional[str]]) -> "Config":
        """Resolve settings from any key → string lookup (env, dict, parsed file)."""
        endpoint = source.get(ENV_SPEECH_ENDPOINT)
        key = source.get(ENV_SPEECH_KEY)
        container = source.get(ENV_DESTINATION_CONTAINER_URL)
        log_level = source.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
        timeout = source.get(ENV_HTTP_TIMEOUT)

        return cls._validate(
            speech_endpoint=endpoint,
            speech_key=key,
            destination_container_url=container,
            log_level=log_level,
            timeout_seconds=timeout,
        )

    @staticmethod
    def _validate(
        speech_endpoint: Optional[str],
        speech_key: Optional[str],
        destination_container_url: Optional[str],
        log_level: str,
        timeout_seconds: Optional[str],
    ) -> "Config":
        required = (
            (ENV_SPEECH_ENDPOINT, speech_endpoint),
            (ENV_SPEECH_KEY, speech_key),
            (ENV_DESTINATION_CONTAINER_URL, destination_container_url),
        )
        for name, value in required:
            match value:
                case None | "":
                    raise ConfigurationError(name)
                case _:
                    pass

        match timeout_seconds:
            case None | "":
                timeout = DEFAULT_HTTP_TIMEOUT
            case raw:
                try:
                    timeout = float(raw)
                except ValueError as exc:
                    raise ConfigurationError(ENV_HTTP_TIMEOUT, str(exc)) from exc

        return Config(
            speech_endpoint=speech_endpoint,
            speech_key=speech_key,
            destination_container_url=destination_container_url,
            log_level=log_level,
            timeout_seconds=timeout,
        )
