"""Tests for digest parsing and layer deduplication."""

import pytest

from conftest import layer
from layercache.core import LayerReference, MalformedDigest, bucket_key, deduplicate, payload


def test_payload_strips_algorithm() -> None:
    assert payload("sha256:ac202bdeadbeef") == "ac202bdeadbeef"


def test_payload_splits_on_first_colon_only() -> None:
    assert payload("sha256:abc:def") == "abc:def"


@pytest.mark.parametrize("digest", ["ac202bdeadbeef", "sha256:", ""])
def test_payload_rejects_malformed_digest(digest: str) -> None:
    with pytest.raises(MalformedDigest):
        payload(digest)


def test_malformed_digest_is_value_error() -> None:
    with pytest.raises(ValueError):
        payload("nocolon")


def test_bucket_key_is_first_six_hex_chars() -> None:
    assert bucket_key("sha256:ac202bdeadbeef") == "ac202b"


def test_bucket_key_short_payload_is_used_whole() -> None:
    assert bucket_key("sha256:ab12") == "ab12"


def test_deduplicate_preserves_first_seen_order() -> None:
    layers = [layer("sha256:aa11"), layer("sha256:bb22"), layer("sha256:aa11")]

    assert deduplicate(layers) == ["sha256:aa11", "sha256:bb22"]


def test_deduplicate_compares_hex_payload_not_algorithm() -> None:
    layers = [layer("sha256:aa11"), layer("sha512:aa11"), layer("sha256:cc33")]

    assert deduplicate(layers) == ["sha256:aa11", "sha256:cc33"]


def test_deduplicate_empty_input() -> None:
    assert deduplicate([]) == []


def test_deduplicate_ignores_informational_fields() -> None:
    layers = [
        LayerReference("sha256:aa11", original_ref="first", size=10),
        LayerReference("sha256:aa11", original_ref="second", size=20),
    ]

    assert deduplicate(layers) == ["sha256:aa11"]


def test_deduplicate_fails_on_malformed_digest() -> None:
    with pytest.raises(MalformedDigest) as excinfo:
        deduplicate([layer("sha256:aa11"), layer("bb22")])

    assert excinfo.value.digest == "bb22"
