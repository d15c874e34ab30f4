"""Command-line entry point for imggen.

Request lifecycle:
1. Parse flags and the prompt.
2. Reject an empty prompt, then validate options against the model table.
3. Load credentials and endpoint from the environment.
4. Send one generation request and print the interpreted outcome.

Usage help goes to stderr; results and error blocks go to stdout. Every
failure path exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from imggen.config import environment
from imggen.config.image import (
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_QUALITY,
    DEFAULT_SIZE,
    DEFAULT_STYLE,
)
from imggen.core.config import load_settings
from imggen.core.errors import format_service_error, shows_usage
from imggen.core.exceptions import ServiceError, ValidationError
from imggen.core.logging import setup_logging
from imggen.features.image import (
    GenerationOptions,
    ImageGenerationService,
    validate_options,
    validate_prompt,
)

logger = logging.getLogger(__name__)

ENVIRONMENT_HELP = f"""\
Environment Variables:

  {environment.API_KEY_ENV}: The API key to use for image generation.

  {environment.API_ENDPOINT_ENV}: (Optional) The url to send request. Default to {environment.DEFAULT_API_ENDPOINT}

  {environment.TIMEOUT_ENV}: (Optional) Request timeout in seconds. Default to {environment.DEFAULT_TIMEOUT:g}

  {environment.LOG_LEVEL_ENV}: (Optional) Diagnostics level written to stderr. Default to {environment.DEFAULT_LOG_LEVEL}
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Report parse failures as usage errors instead of exiting with status 2."""

    def error(self, message: str):  # type: ignore[override]
        raise ValidationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="imggen",
        usage="%(prog)s [options] [prompt]",
        description="Generate an image from a text prompt and print its URL.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-model",
        "--model",
        default=DEFAULT_MODEL,
        help="The model to use for image generation.\n Options: 'dall-e-2', 'dall-e-3'",
    )
    parser.add_argument(
        "-size",
        "--size",
        default=DEFAULT_SIZE,
        help=(
            "Size of the image to generate.\n"
            " Options for dall-e-2: '256x256', '512x512', '1024x1024'\n"
            " Options for dall-e-3: '1024x1024', '1792x1024', '1024x1792'"
        ),
    )
    parser.add_argument(
        "-style",
        "--style",
        default=DEFAULT_STYLE,
        help=(
            "Style of the image to generate. This flag is only supported for model 'dall-e-3'.\n"
            " Options: 'vivid', 'natural'"
        ),
    )
    parser.add_argument(
        "-quality",
        "--quality",
        default=DEFAULT_QUALITY,
        help=(
            "Quality of the image to generate. This flag is only supported for model 'dall-e-3'.\n"
            " Options: 'standard', 'hd'"
        ),
    )
    parser.add_argument(
        "-output",
        "--output",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format.\n Options: 'list' (image URL and revised prompt), 'json' (raw response)",
    )
    parser.add_argument("prompt", nargs="?", default="", help="Text description of the image.")
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def _emit(text: str) -> None:
    sys.stdout.write(text)
    if text and not text.endswith("\n"):
        sys.stdout.write("\n")
    sys.stdout.flush()


def _split_at_terminator(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` at the first ``--``; everything after it is positional."""

    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def main(argv: Sequence[str] | None = None) -> int:
    """Run one invocation and return the process exit status."""

    parser = build_parser()
    flags, trailing = _split_at_terminator(sys.argv[1:] if argv is None else argv)

    try:
        args = parser.parse_intermixed_args(flags)
        positionals = ([args.prompt] if args.prompt else []) + args.extra + trailing
        prompt, extra = (positionals[0], positionals[1:]) if positionals else ("", [])
        if extra:
            logger.warning("Ignoring extra arguments after the prompt: %s", " ".join(extra))

        prompt = validate_prompt(prompt)
        options = validate_options(
            GenerationOptions(
                model=args.model,
                size=args.size,
                style=args.style,
                quality=args.quality,
                output_format=args.output,
            )
        )
        settings = load_settings()
        outcome = ImageGenerationService(settings).generate(options, prompt)
    except ServiceError as exc:
        if shows_usage(exc):
            parser.print_help(sys.stderr)
        _emit(format_service_error(exc))
        return 1

    if outcome.show_usage:
        parser.print_help(sys.stderr)
    _emit(outcome.stdout)
    return outcome.exit_code


def run() -> None:
    """Console-script entry point."""

    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
