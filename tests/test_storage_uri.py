import pytest

from gcloud_ops.domain import build_storage_uri, encode_object_path, parse_storage_uri
from gcloud_ops.domain.storage_uri import normalize_bucket, validate_bucket
from gcloud_ops.exceptions import ValidationError


@pytest.mark.parametrize(
    "uri",
    ["gs://bucket/a/b/c.mp3", "gs://my-bucket/file.wav", "gs://b/dir/with space.txt"],
)
def test_parse_then_build_round_trips(uri):
    assert build_storage_uri(*parse_storage_uri(uri)) == uri


def test_parse_splits_bucket_from_nested_path():
    assert parse_storage_uri("gs://bucket/a/b/c.mp3") == ("bucket", "a/b/c.mp3")


@pytest.mark.parametrize(
    "uri",
    [
        "",
        "bucket/a.mp3",
        "s3://bucket/a.mp3",
        "gs://bucket",
        "gs://bucket/",
        "gs:///a.mp3",
        "gs://buck\x01et/a.mp3",
        "gs://Bucket/a.mp3",
    ],
)
def test_parse_rejects_malformed_uris(uri):
    with pytest.raises(ValidationError):
        parse_storage_uri(uri)


def test_encode_object_path_keeps_separators():
    assert encode_object_path("audio/my file#1.mp3") == "audio/my%20file%231.mp3"


@pytest.mark.parametrize(
    "value, bucket",
    [
        ("bucket", "bucket"),
        ("gs://bucket", "bucket"),
        ("gs://bucket/audio/", "bucket"),
        (" bucket/ ", "bucket"),
    ],
)
def test_normalize_bucket(value, bucket):
    assert normalize_bucket(value) == bucket


@pytest.mark.parametrize(
    "value", ["gs://", "buck\x01et", "gs://my bucket/a", "-bucket"]
)
def test_normalize_bucket_rejects_invalid_names(value):
    with pytest.raises(ValidationError):
        normalize_bucket(value)


@pytest.mark.parametrize("bucket", ["b", "my-bucket", "logs.example.com", "a_b-9"])
def test_validate_bucket_accepts_gcs_names(bucket):
    assert validate_bucket(bucket) == bucket
