"""Entry point — wires Config → SpeechBatchClient and submits one job by hand."""
import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from speech_batch.config import Config
from speech_batch.constants import MSG_HARNESS_FAILED, MSG_HARNESS_STARTING
from speech_batch.errors import (
    ConfigurationError,
    SubmissionArgumentError,
    TranscriptionServiceError,
)
from speech_batch.transcription.models import ProfanityFilterMode, PunctuationMode
from speech_batch.transcription.speech_batch import SpeechBatchClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="speech-batch",
        description="Submit a batch transcription job for one or more audio URLs.",
    )
    parser.add_argument("content_urls", nargs="+", metavar="URL", help="absolute audio file URL")
    parser.add_argument("-n", "--display-name", required=True)
    parser.add_argument("--locale", default=None, help="defaults to ja-JP")
    parser.add_argument(
        "--no-diarization",
        dest="diarization_enabled",
        action="store_const",
        const=False,
        default=None,
    )
    parser.add_argument(
        "--punctuation",
        choices=[m.value for m in PunctuationMode],
        default=None,
    )
    parser.add_argument(
        "--profanity",
        choices=[m.value for m in ProfanityFilterMode],
        default=None,
    )
    return parser.parse_args(argv)


async def _submit(config: Config, args: argparse.Namespace) -> dict:
    async with SpeechBatchClient(config) as client:
        info = await client.submit_transcription(
            args.content_urls,
            args.display_name,
            locale=args.locale,
            diarization_enabled=args.diarization_enabled,
            punctuation_mode=args.punctuation,
            profanity_filter_mode=args.profanity,
        )
    return info.to_dict()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = Config.from_env()
    except ConfigurationError as exc:
        _setup_logging("INFO")
        logger.error(MSG_HARNESS_FAILED, exc)
        return 1
    _setup_logging(config.log_level)

    logger.info(MSG_HARNESS_STARTING, config.transcriptions_base)
    try:
        result = asyncio.run(_submit(config, args))
    except (ConfigurationError, SubmissionArgumentError, TranscriptionServiceError) as exc:
        logger.error(MSG_HARNESS_FAILED, exc)
        return 1

    Console().print_json(data=result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
