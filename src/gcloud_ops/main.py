"""
Command line entry point.

Runs a single Google Cloud operation and prints its output.
"""

import argparse
import asyncio
import os
import sys

from pydantic import ValidationError as ArgumentError

from gcloud_ops.config import (
    SPEECH_MODELS,
    ListBucketArgs,
    ReadFileArgs,
    SpeechToTextArgs,
)
from gcloud_ops.domain import (
    AuthKind,
    InputMode,
    ListOutputFormat,
    OutputDestination,
    SecretEncoding,
)
from gcloud_ops.exceptions import GCloudError
from gcloud_ops.logging import setup_logging
from gcloud_ops.operations import list_bucket, read_file, speech_to_text

_AUTH_KINDS = {"api-key": AuthKind.API_KEY, "oauth": AuthKind.OAUTH_TOKEN}
_ENCODINGS = {e.name.lower(): e for e in SecretEncoding}
_FORMATS = {
    "uris": ListOutputFormat.URIS,
    "filenames": ListOutputFormat.FILENAMES,
    "json": ListOutputFormat.JSON,
}


def _auth_kwargs(args) -> dict:
    return {
        "auth_type": _AUTH_KINDS[args.auth_type],
        "auth_string": args.auth_string,
        "auth_encoding": _ENCODINGS[args.auth_encoding],
        "quota_project": args.quota_project,
    }


def cmd_list_bucket(args) -> str:
    op_args = ListBucketArgs(
        prefix=args.prefix,
        output_format=_FORMATS[args.format],
        **_auth_kwargs(args),
    )
    return asyncio.run(list_bucket.run(args.bucket, op_args))


def cmd_read_file(args) -> bytes:
    op_args = ReadFileArgs(**_auth_kwargs(args))
    return asyncio.run(read_file.run(args.uri, op_args))


def cmd_transcribe(args) -> str:
    if args.output_bucket:
        destination = OutputDestination.WRITE_TO_GCS
    else:
        destination = OutputDestination.RETURN
    op_args = SpeechToTextArgs(
        input_mode=InputMode.RAW_BYTES_BASE64 if args.raw else InputMode.GCS_URI,
        language_code=args.language_code,
        model=args.model,
        output_destination=destination,
        output_bucket=args.output_bucket or "",
        max_poll_minutes=args.max_poll_minutes,
        **_auth_kwargs(args),
    )
    source = sys.stdin.read() if args.source == "-" else args.source

    def report(elapsed_seconds: int) -> None:
        print(f"Waiting for transcription... {elapsed_seconds}s", file=sys.stderr)

    return asyncio.run(speech_to_text.run(source, op_args, on_tick=report))


def _add_auth_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--auth-type",
        choices=sorted(_AUTH_KINDS),
        default=os.getenv("GCP_AUTH_TYPE", "api-key"),
        help="How the auth string is sent (default: GCP_AUTH_TYPE or api-key)",
    )
    parser.add_argument(
        "--auth-string",
        default=os.getenv("GCP_AUTH_STRING", ""),
        help="API key or OAuth access token (default: GCP_AUTH_STRING)",
    )
    parser.add_argument(
        "--auth-encoding",
        choices=sorted(_ENCODINGS),
        default=os.getenv("GCP_AUTH_ENCODING", "utf8"),
        help="Encoding of the auth string (default: GCP_AUTH_ENCODING or utf8)",
    )
    parser.add_argument(
        "--quota-project",
        default=os.getenv("GCP_QUOTA_PROJECT", ""),
        help="Billing project for OAuth tokens (default: GCP_QUOTA_PROJECT)",
    )


def _check_auth_defaults(parser: argparse.ArgumentParser, args) -> None:
    """Rejects environment defaults, which argparse does not match to choices."""
    if args.auth_type not in _AUTH_KINDS:
        parser.error(
            f"invalid auth type {args.auth_type!r} "
            f"(choose from {', '.join(sorted(_AUTH_KINDS))})"
        )
    if args.auth_encoding not in _ENCODINGS:
        parser.error(
            f"invalid auth encoding {args.auth_encoding!r} "
            f"(choose from {', '.join(sorted(_ENCODINGS))})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcloud-ops",
        description="Google Cloud Storage and Speech-to-Text operations",
    )
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser(
        "list-bucket", help="List objects in a bucket"
    )
    list_parser.add_argument("bucket", help="Bucket name or gs:// URI")
    list_parser.add_argument(
        "--prefix", default="audio/", help="Folder prefix (default: audio/)"
    )
    list_parser.add_argument("--format", choices=sorted(_FORMATS), default="uris")
    _add_auth_arguments(list_parser)
    list_parser.set_defaults(handler=cmd_list_bucket)

    read_parser = subparsers.add_parser(
        "read-file", help="Download an object to stdout"
    )
    read_parser.add_argument("uri", help="gs://bucket/object-path")
    _add_auth_arguments(read_parser)
    read_parser.set_defaults(handler=cmd_read_file)

    transcribe_parser = subparsers.add_parser("transcribe", help="Transcribe audio")
    transcribe_parser.add_argument(
        "source", help="gs:// URI, or Base64 audio with --raw ('-' reads stdin)"
    )
    transcribe_parser.add_argument(
        "--raw", action="store_true", help="Source is Base64 audio (short clips only)"
    )
    transcribe_parser.add_argument("--language-code", default="en-US")
    transcribe_parser.add_argument(
        "--model", choices=SPEECH_MODELS, default="latest_long"
    )
    transcribe_parser.add_argument(
        "--output-bucket", help="Write the transcript to this bucket and print its URI"
    )
    transcribe_parser.add_argument("--max-poll-minutes", type=float, default=30)
    _add_auth_arguments(transcribe_parser)
    transcribe_parser.set_defaults(handler=cmd_transcribe)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2
    _check_auth_defaults(parser, args)

    setup_logging(stream=sys.stderr)
    try:
        output = args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1
    except (GCloudError, ArgumentError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(output, bytes):
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
