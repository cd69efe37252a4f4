import base64
import json

import httpx
import pytest

from conftest import run
from gcloud_ops.config import ListBucketArgs, ReadFileArgs, SpeechToTextArgs
from gcloud_ops.domain import (
    AuthKind,
    InputMode,
    ListOutputFormat,
    OutputDestination,
    SecretEncoding,
)
from gcloud_ops.exceptions import ValidationError
from gcloud_ops.operations import list_bucket, read_file, speech_to_text

LISTING = {
    "items": [
        {"name": "audio/"},
        {"name": "audio/one.mp3", "size": "10", "contentType": "audio/mpeg"},
        {"name": "audio/two.wav", "size": "20", "contentType": "audio/wav"},
    ]
}
RECOGNITION = {"results": [{"alternatives": [{"transcript": "hi"}]}]}


def list_args(**kwargs):
    return ListBucketArgs(auth_string="test-key", **kwargs)


class TestListBucket:
    def test_returns_uris_one_per_line(self, transport, config):
        transport.queue(httpx.Response(200, json=LISTING))

        output = run(
            list_bucket.run(
                "gs://bucket/ignored/", list_args(), transport.client(), config
            )
        )

        assert output == "gs://bucket/audio/one.mp3\ngs://bucket/audio/two.wav"
        assert transport.requests[0].url.path == "/storage/v1/b/bucket/o"

    def test_filenames_format(self, transport, config):
        transport.queue(httpx.Response(200, json=LISTING))
        args = list_args(output_format=ListOutputFormat.FILENAMES)

        output = run(list_bucket.run("bucket", args, transport.client(), config))

        assert output == "one.mp3\ntwo.wav"

    def test_json_format_uses_listing_keys(self, transport, config):
        transport.queue(httpx.Response(200, json=LISTING))
        args = list_args(output_format=ListOutputFormat.JSON)

        output = run(list_bucket.run("bucket", args, transport.client(), config))

        assert json.loads(output)[0] == {
            "name": "audio/one.mp3",
            "gs_uri": "gs://bucket/audio/one.mp3",
            "size": 10,
            "contentType": "audio/mpeg",
        }

    def test_empty_listing_message(self, transport, config):
        transport.queue(httpx.Response(200, json={"items": [{"name": "audio/"}]}))
        output = run(list_bucket.run("bucket", list_args(), transport.client(), config))
        assert output == "No objects found in gs://bucket/audio/"

    @pytest.mark.parametrize("bucket", ["  ", "buck\x01et", "gs://my bucket/audio"])
    def test_invalid_bucket_is_rejected(self, transport, config, bucket):
        with pytest.raises(ValidationError):
            run(list_bucket.run(bucket, list_args(), transport.client(), config))
        assert transport.requests == []

    def test_encoded_auth_string_is_decoded(self, transport, config):
        transport.queue(httpx.Response(200, json=LISTING))
        args = ListBucketArgs(
            auth_string=base64.b64encode(b"decoded-key").decode(),
            auth_encoding=SecretEncoding.BASE64,
        )

        run(list_bucket.run("bucket", args, transport.client(), config))

        assert transport.requests[0].url.params["key"] == "decoded-key"


class TestReadFile:
    def test_returns_raw_bytes(self, transport, config):
        transport.queue(httpx.Response(200, content=b"\xffdata"))
        args = ReadFileArgs(auth_type=AuthKind.OAUTH_TOKEN, auth_string="tok")

        data = run(
            read_file.run(" gs://bucket/img/a.png\n", args, transport.client(), config)
        )

        assert data == b"\xffdata"

    @pytest.mark.parametrize(
        "uri", ["https://example.com/a.png", "gs://buck\x01et/a.mp3"]
    )
    def test_rejects_invalid_input(self, transport, config, uri):
        args = ReadFileArgs(auth_string="k")
        with pytest.raises(ValidationError):
            run(read_file.run(uri, args, transport.client(), config))
        assert transport.requests == []


class TestSpeechToText:
    def test_returns_transcript(self, transport, config):
        transport.queue(
            httpx.Response(200, json={"name": "op-1"}),
            httpx.Response(200, json={"done": True, "response": RECOGNITION}),
        )
        args = SpeechToTextArgs(auth_string="k")

        text = run(
            speech_to_text.run(
                "gs://bucket/audio/a.mp3", args, transport.client(), config
            )
        )

        assert text == "hi"

    def test_writes_to_output_bucket(self, transport, config):
        transport.queue(
            httpx.Response(200, json=RECOGNITION),
            httpx.Response(200, json={}),
        )
        args = SpeechToTextArgs(
            auth_string="k",
            input_mode=InputMode.RAW_BYTES_BASE64,
            output_destination=OutputDestination.WRITE_TO_GCS,
            output_bucket="out",
        )

        uri = run(speech_to_text.run("UklGRg==", args, transport.client(), config))

        assert uri == "gs://out/output/audio/raw_audio/speech-to-text/text.txt"

    def test_gcs_mode_requires_gcs_uri(self, transport, config):
        args = SpeechToTextArgs(auth_string="k")
        with pytest.raises(ValidationError):
            run(speech_to_text.run("UklGRg==", args, transport.client(), config))
        assert transport.requests == []

    def test_write_mode_requires_bucket(self, transport, config):
        args = SpeechToTextArgs(
            auth_string="k", output_destination=OutputDestination.WRITE_TO_GCS
        )
        with pytest.raises(ValidationError):
            run(
                speech_to_text.run(
                    "gs://bucket/a.mp3", args, transport.client(), config
                )
            )
        assert transport.requests == []

    def test_empty_auth_string_is_rejected(self, transport, config):
        args = SpeechToTextArgs()
        with pytest.raises(ValidationError):
            run(
                speech_to_text.run(
                    "gs://bucket/a.mp3", args, transport.client(), config
                )
            )
        assert transport.requests == []
