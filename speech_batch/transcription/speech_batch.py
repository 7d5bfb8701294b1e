"""SpeechBatchClient — Azure Speech batch transcription backend (REST v3.2)."""
import asyncio
import json
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, TypeVar
from urllib.parse import urlsplit, urlunsplit

import httpx

from speech_batch.config import Config
from speech_batch.constants import (
    CONTENT_TYPE_JSON_UTF8,
    ENV_SPEECH_ENDPOINT,
    FILES_SEGMENT,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_LOCATION,
    HEADER_SUBSCRIPTION_KEY,
    MEDIA_TYPE_JSON,
    MSG_ARG_BAD_MODE,
    MSG_ARG_CONTENT_URLS_EMPTY,
    MSG_ARG_CONTENT_URLS_STR,
    MSG_ARG_DISPLAY_NAME_BLANK,
    MSG_ARG_MISSING,
    MSG_ARG_RELATIVE_URL,
    MSG_BAD_LOCATION,
    MSG_CANCELLED,
    MSG_MALFORMED_LOCATION,
    MSG_NO_LOCATION,
    MSG_SUBMIT_CANCELLED,
    MSG_SUBMIT_HTTP_FAIL,
    MSG_SUBMIT_TRANSPORT_FAIL,
    MSG_SUBMITTED,
    MSG_SUBMITTING,
    TRANSCRIPTIONS_PATH,
)
from speech_batch.errors import (
    ArgumentInvalidError,
    ArgumentMissingError,
    ConfigurationError,
    InvalidResponseError,
    TranscriptionHTTPError,
    TranscriptionTransportError,
)
from speech_batch.transcription.client import TranscriptionJobClient
from speech_batch.transcription.models import (
    DEFAULT_OPTIONS,
    ProfanityFilterMode,
    PunctuationMode,
    TranscriptionJobInfo,
    TranscriptionOptions,
)

logger = logging.getLogger(__name__)

ModeT = TypeVar("ModeT", bound=Enum)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def _is_absolute(url: str) -> bool:
    parts = urlsplit(url)
    return bool(parts.scheme and parts.netloc)


def _validate_content_urls(content_urls: Iterable[str] | None) -> tuple[str, ...]:
    match content_urls:
        case None:
            raise ArgumentMissingError("content_urls", MSG_ARG_MISSING % "content_urls")
        case str() | bytes():
            raise ArgumentInvalidError("content_urls", MSG_ARG_CONTENT_URLS_STR)
        case _:
            pass

    urls = tuple(str(u) for u in content_urls)
    if not urls:
        raise ArgumentInvalidError("content_urls", MSG_ARG_CONTENT_URLS_EMPTY)
    for url in urls:
        if not _is_absolute(url):
            raise ArgumentInvalidError("content_urls", MSG_ARG_RELATIVE_URL % url)
    return urls


def _validate_display_name(display_name: str | None) -> str:
    match display_name:
        case str() as name if name.strip():
            return name
        case _:
            raise ArgumentInvalidError("display_name", MSG_ARG_DISPLAY_NAME_BLANK)


def _coerce_mode(mode_cls: type[ModeT], value: Any, argument: str) -> Optional[ModeT]:
    """Accept an enumerant or its wire name; None means "use the default"."""
    if value is None:
        return None
    try:
        return mode_cls(value)
    except ValueError:
        raise ArgumentInvalidError(argument, MSG_ARG_BAD_MODE % (argument, value)) from None


def build_request_body(
    content_urls: tuple[str, ...],
    display_name: str,
    destination_container_url: str,
    options: TranscriptionOptions,
) -> dict[str, Any]:
    """JSON payload for POST /transcriptions. Keys are the service's camelCase names."""
    return {
        "displayName": display_name,
        "locale": options.locale,
        "contentUrls": list(content_urls),
        "properties": {
            "destinationContainerUrl": destination_container_url,
            "diarizationEnabled": options.diarization_enabled,
            "punctuationMode": options.punctuation_mode.value,
            "profanityFilterMode": options.profanity_filter_mode.value,
        },
    }


def parse_job_location(job_url: str) -> tuple[str, str]:
    """Return (job_id, files_url) for the absolute URL of a created job."""
    parts = urlsplit(job_url)
    path = parts.path.rstrip("/")
    job_id = path.rsplit("/", 1)[-1]
    match job_id:
        case "":
            raise InvalidResponseError(MSG_BAD_LOCATION % job_url)
        case _:
            pass
    files_url = urlunsplit((parts.scheme, parts.netloc, f"{path}/{FILES_SEGMENT}", "", ""))
    return job_id, files_url


async def _abort(task: asyncio.Task) -> None:
    """Cancel ``task`` and wait until it has actually stopped."""
    task.cancel()
    # The send outcome is discarded; only its completion matters here.
    await asyncio.gather(task, return_exceptions=True)


# ── client ────────────────────────────────────────────────────────────────────


class SpeechBatchClient(TranscriptionJobClient):
    """Creates batch transcription jobs; one POST per submission, no retries.

    Configuration and options are immutable after construction, so a single
    instance may serve any number of concurrent submissions. An injected
    ``http_client`` stays owned by the caller; otherwise the client creates one
    and closes it in ``aclose()``.
    """

    def __init__(
        self,
        config: Config,
        http_client: httpx.AsyncClient | None = None,
        options: TranscriptionOptions = DEFAULT_OPTIONS,
    ) -> None:
        self._config = config
        self._options = options
        self._owns_http = http_client is None
        self._http = (
            httpx.AsyncClient(timeout=config.timeout_seconds)
            if http_client is None
            else http_client
        )

    @classmethod
    def from_mapping(
        cls,
        source: Mapping[str, Optional[str]],
        http_client: httpx.AsyncClient | None = None,
    ) -> "SpeechBatchClient":
        return cls(Config.from_mapping(source), http_client=http_client)

    @property
    def transcriptions_url(self) -> str:
        return self._config.transcriptions_base + TRANSCRIPTIONS_PATH

    async def __aenter__(self) -> "SpeechBatchClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ── TranscriptionJobClient interface ──────────────────────────────────────

    async def submit_transcription(
        self,
        content_urls: Iterable[str] | None,
        display_name: str | None,
        locale: str | None = None,
        diarization_enabled: bool | None = None,
        punctuation_mode: PunctuationMode | str | None = None,
        profanity_filter_mode: ProfanityFilterMode | str | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> TranscriptionJobInfo:
        urls = _validate_content_urls(content_urls)
        name = _validate_display_name(display_name)
        options = self._options.override(
            locale=locale,
            diarization_enabled=diarization_enabled,
            punctuation_mode=_coerce_mode(PunctuationMode, punctuation_mode, "punctuation_mode"),
            profanity_filter_mode=_coerce_mode(
                ProfanityFilterMode, profanity_filter_mode, "profanity_filter_mode"
            ),
        )
        request = self._build_request(urls, name, options)

        if cancel is not None and cancel.is_set():
            logger.info(MSG_SUBMIT_CANCELLED, name)
            raise asyncio.CancelledError(MSG_CANCELLED)

        logger.debug(MSG_SUBMITTING, name, len(urls), options.locale)
        try:
            response = await self._send(request, cancel)
        except asyncio.CancelledError:
            logger.info(MSG_SUBMIT_CANCELLED, name)
            raise
        except httpx.HTTPError as exc:
            logger.warning(MSG_SUBMIT_TRANSPORT_FAIL, exc)
            raise TranscriptionTransportError.from_exception(exc) from exc
        submitted_at = datetime.now(timezone.utc)

        if not response.is_success:
            logger.warning(MSG_SUBMIT_HTTP_FAIL, response.status_code)
            raise TranscriptionHTTPError(response.status_code, response.text)

        match response.headers.get(HEADER_LOCATION):
            case None | "":
                raise InvalidResponseError(MSG_NO_LOCATION)
            case location:
                try:
                    job_url = str(request.url.join(location))
                except httpx.InvalidURL as exc:
                    raise InvalidResponseError(MSG_MALFORMED_LOCATION % location) from exc

        job_id, files_url = parse_job_location(job_url)
        logger.info(MSG_SUBMITTED, job_id, job_url)

        return TranscriptionJobInfo(
            job_id=job_id,
            job_url=job_url,
            files_url=files_url,
            display_name=name,
            locale=options.locale,
            diarization_enabled=options.diarization_enabled,
            punctuation_mode=options.punctuation_mode,
            profanity_filter_mode=options.profanity_filter_mode,
            content_urls=urls,
            destination_container_url=self._config.destination_container_url,
            submitted_at_utc=submitted_at,
        )

    # ── internals ─────────────────────────────────────────────────────────────

    def _build_request(
        self, urls: tuple[str, ...], name: str, options: TranscriptionOptions
    ) -> httpx.Request:
        body = build_request_body(urls, name, self._config.destination_container_url, options)
        try:
            return self._http.build_request(
                "POST",
                self.transcriptions_url,
                headers={
                    HEADER_SUBSCRIPTION_KEY: self._config.speech_key,
                    HEADER_ACCEPT: MEDIA_TYPE_JSON,
                    HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON_UTF8,
                },
                content=json.dumps(body, ensure_ascii=False).encode("utf-8"),
            )
        except httpx.InvalidURL as exc:
            # Endpoint format is only checked here, not when Config is resolved.
            raise ConfigurationError(ENV_SPEECH_ENDPOINT, str(exc)) from exc

    async def _send(self, request: httpx.Request, cancel: asyncio.Event | None) -> httpx.Response:
        match cancel:
            case None:
                return await self._http.send(request)
            case event:
                pass

        sending = asyncio.create_task(self._http.send(request))
        waiting = asyncio.create_task(event.wait())
        try:
            await asyncio.wait({sending, waiting}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            await _abort(sending)
            raise
        finally:
            waiting.cancel()

        match sending.done():
            case True:
                return sending.result()
            case False:
                await _abort(sending)
                raise asyncio.CancelledError(MSG_CANCELLED)
