"""Value types for batch transcription submissions."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any

from speech_batch.constants import DEFAULT_DIARIZATION_ENABLED, DEFAULT_LOCALE


class PunctuationMode(str, Enum):
    # Values are the wire names; the service rejects anything else.
    NONE = "None"
    DICTATED = "Dictated"
    DICTATED_AND_AUTOMATIC = "DictatedAndAutomatic"


class ProfanityFilterMode(str, Enum):
    NONE = "None"
    MASKED = "Masked"
    REMOVED = "Removed"


@dataclass(frozen=True)
class TranscriptionOptions:
    """Per-job settings with their documented defaults.

    locale                ja-JP
    diarization_enabled   True
    punctuation_mode      DictatedAndAutomatic
    profanity_filter_mode Masked
    """

    locale: str = DEFAULT_LOCALE
    diarization_enabled: bool = DEFAULT_DIARIZATION_ENABLED
    punctuation_mode: PunctuationMode = PunctuationMode.DICTATED_AND_AUTOMATIC
    profanity_filter_mode: ProfanityFilterMode = ProfanityFilterMode.MASKED

    def override(self, **changes: Any) -> "TranscriptionOptions":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_OPTIONS = TranscriptionOptions()


@dataclass(frozen=True)
class TranscriptionJobInfo:
    job_id: str
    job_url: str
    files_url: str
    display_name: str
    locale: str
    diarization_enabled: bool
    punctuation_mode: PunctuationMode
    profanity_filter_mode: ProfanityFilterMode
    content_urls: tuple[str, ...]
    destination_container_url: str
    submitted_at_utc: datetime = field(compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobId": self.job_id,
            "jobUrl": self.job_url,
            "filesUrl": self.files_url,
            "displayName": self.display_name,
            "locale": self.locale,
            "diarizationEnabled": self.diarization_enabled,
            "punctuationMode": self.punctuation_mode.value,
            "profanityFilterMode": self.profanity_filter_mode.value,
            "contentUrls": list(self.content_urls),
            "destinationContainerUrl": self.destination_container_url,
            "submittedAtUtc": self.submitted_at_utc.isoformat(),
        }
