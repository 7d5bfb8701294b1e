"""TranscriptionJobClient — abstract base for batch transcription backends."""
import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable

from speech_batch.transcription.models import (
    ProfanityFilterMode,
    PunctuationMode,
    TranscriptionJobInfo,
)


class TranscriptionJobClient(ABC):
    @abstractmethod
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
        """Create a transcription job for the given audio URLs. Raises on failure."""
        ...
