"""Wire names, config keys, defaults and message templates for speech_batch."""

# Configuration keys (SECTION__Name form, as exported by the hosting environment)
ENV_SPEECH_ENDPOINT = "SPEECH__Endpoint"
ENV_SPEECH_KEY = "SPEECH__Key"
ENV_DESTINATION_CONTAINER_URL = "TRANSCRIPT__DestinationContainerUrl"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_HTTP_TIMEOUT = "SPEECH__TimeoutSeconds"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTTP_TIMEOUT = 30.0

# Batch transcription REST API
TRANSCRIPTIONS_PATH = "/speechtotext/v3.2/transcriptions"
FILES_SEGMENT = "files"
HEADER_SUBSCRIPTION_KEY = "Ocp-Apim-Subscription-Key"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_LOCATION = "Location"
MEDIA_TYPE_JSON = "application/json"
CONTENT_TYPE_JSON_UTF8 = "application/json; charset=utf-8"

# Submission defaults
DEFAULT_LOCALE = "ja-JP"
DEFAULT_DIARIZATION_ENABLED = True

# Error messages
MSG_CONFIG_MISSING = "%s configuration is required"
MSG_CONFIG_INVALID = "%s configuration is invalid: %s"
MSG_ARG_MISSING = "%s is required"
MSG_ARG_CONTENT_URLS_STR = "content_urls must be a sequence of URLs, not a single string"
MSG_ARG_CONTENT_URLS_EMPTY = "content_urls cannot be empty"
MSG_ARG_RELATIVE_URL = "All content URLs must be absolute URIs: %s"
MSG_ARG_DISPLAY_NAME_BLANK = "display_name cannot be null or empty"
MSG_ARG_BAD_MODE = "Unknown %s: %r"
MSG_HTTP_ERROR = "Transcription service returned HTTP %d: %s"
MSG_TRANSPORT_ERROR = "Request to transcription service failed: %s"
MSG_NO_LOCATION = "Location header not found in response"
MSG_BAD_LOCATION = "Location header has no job id: %s"
MSG_MALFORMED_LOCATION = "Location header is not a valid URL: %s"
MSG_CANCELLED = "Transcription submission cancelled"

# Log messages
MSG_SUBMITTING = "Submitting transcription %r (%d file(s), locale=%s)"
MSG_SUBMITTED = "Created transcription job %s at %s"
MSG_SUBMIT_HTTP_FAIL = "Transcription submission failed with HTTP %d"
MSG_SUBMIT_TRANSPORT_FAIL = "Transcription submission failed: %s"
MSG_SUBMIT_CANCELLED = "Transcription submission %r cancelled"
MSG_HARNESS_STARTING = "Submitting to %s"
MSG_HARNESS_FAILED = "Submission failed: %s"
