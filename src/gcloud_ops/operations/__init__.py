"""Operation entry points, one ``run(input, args)`` coroutine each."""

from . import list_bucket, read_file, speech_to_text

__all__ = ["list_bucket", "read_file", "speech_to_text"]
