import pytest

from gcloud_ops.domain import (
    NO_SPEECH_DETECTED,
    InputMode,
    TranscriptBuilder,
    TranscriptRequest,
)


@pytest.fixture
def builder():
    return TranscriptBuilder()


@pytest.mark.parametrize("response", [None, {}, {"results": []}, {"results": None}])
def test_no_results_yields_sentinel(builder, response):
    assert builder.build(response).text == NO_SPEECH_DETECTED


def test_joins_first_alternatives_and_drops_empty(builder):
    response = {
        "results": [
            {"alternatives": [{"transcript": "a"}, {"transcript": "ignored"}]},
            {"alternatives": [{"transcript": ""}]},
            {"alternatives": [{"transcript": "b"}]},
        ]
    }
    assert builder.build(response).text == "a b"


def test_results_without_alternatives_are_skipped(builder):
    response = {
        "results": [
            {},
            {"alternatives": []},
            {"alternatives": [{"transcript": " hello "}]},
        ]
    }
    assert builder.build(response).text == "hello"


def test_output_path_uses_source_file_name(builder):
    request = TranscriptRequest(
        mode=InputMode.GCS_URI, payload="gs://bucket/audio/talk.mp3"
    )
    path = builder.derive_output_path(request)
    assert path == "output/audio/talk.mp3/speech-to-text/text.txt"


def test_output_path_for_raw_audio_uses_placeholder(builder):
    request = TranscriptRequest(mode=InputMode.RAW_BYTES_BASE64, payload="UklGRg==")
    path = builder.derive_output_path(request)
    assert path == "output/audio/raw_audio/speech-to-text/text.txt"
