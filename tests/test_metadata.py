import pytest

from gocardless_client.errors import CapacityExceeded, InvalidKey, InvalidValue, MetadataError
from gocardless_client.models import Metadata


def test_size_tracks_distinct_keys():
    """Test that up to three distinct keys are all stored"""
    metadata = Metadata()
    for count, key in enumerate(["a", "b", "c"], start=1):
        metadata.set(key, "v")
        assert len(metadata) == count

    metadata.set("a", "again")
    assert len(metadata) == 3


def test_fourth_key_exceeds_capacity():
    """Test that a new key on a full store is rejected and nothing changes"""
    metadata = Metadata({"a": "1", "b": "2", "c": "3"})

    with pytest.raises(CapacityExceeded):
        metadata.set("d", "4")

    assert metadata == {"a": "1", "b": "2", "c": "3"}
    assert "d" not in metadata


def test_overwrite_on_full_store():
    """Test that an existing key can be overwritten when the store is full"""
    metadata = Metadata({"a": "1", "b": "2", "c": "3"})

    metadata.set("b", "two")

    assert len(metadata) == 3
    assert metadata["b"] == "two"


@pytest.mark.parametrize("key", ["", None, 42, "k" * 51])
def test_invalid_keys_rejected(key):
    metadata = Metadata()

    with pytest.raises(InvalidKey):
        metadata.set(key, "v")

    assert len(metadata) == 0


def test_key_length_boundary():
    metadata = Metadata()
    metadata.set("k" * 50, "v")
    assert metadata["k" * 50] == "v"


def test_value_length_boundary():
    """Test the 500 character value limit"""
    metadata = Metadata()

    with pytest.raises(InvalidValue):
        metadata.set("k", "v" * 501)
    assert "k" not in metadata

    metadata.set("k", "v" * 500)
    assert len(metadata["k"]) == 500

    metadata.set("empty", "")
    assert metadata["empty"] == ""


def test_none_value_rejected():
    with pytest.raises(InvalidValue):
        Metadata().set("k", None)


def test_remove_absent_key_is_noop():
    metadata = Metadata({"a": "1"})
    metadata.remove("missing")
    assert metadata == {"a": "1"}


def test_remove_frees_a_slot():
    """Test that removing from a full store lets the same key be set again"""
    metadata = Metadata({"a": "1", "b": "2", "c": "3"})

    metadata.remove("c")
    metadata.set("c", "three")

    assert metadata.to_dict() == {"a": "1", "b": "2", "c": "three"}


def test_clear_allows_fresh_inserts():
    metadata = Metadata({"a": "1", "b": "2", "c": "3"})

    metadata.clear()
    assert len(metadata) == 0

    for key in ["x", "y", "z"]:
        metadata[key] = "v"
    assert sorted(metadata) == ["x", "y", "z"]


def test_mapping_methods_are_validated():
    """Test that inherited mapping helpers still go through validation"""
    metadata = Metadata()

    with pytest.raises(InvalidKey):
        metadata.setdefault("", "v")
    with pytest.raises(CapacityExceeded):
        metadata.update({"a": "1", "b": "2", "c": "3", "d": "4"})

    assert len(metadata) == 3
    assert metadata.get("d") is None
    assert metadata.pop("a") == "1"
    with pytest.raises(KeyError):
        del metadata["a"]


def test_constructor_validates_source():
    with pytest.raises(CapacityExceeded):
        Metadata({"a": "1", "b": "2", "c": "3", "d": "4"})
    with pytest.raises(InvalidKey):
        Metadata(**{"k" * 51: "v"})


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Metadata().set("", "v")
    assert issubclass(InvalidValue, MetadataError)


def test_equality_and_snapshot():
    metadata = Metadata(salesforce_id="ABCD1234")

    snapshot = metadata.to_dict()
    snapshot["other"] = "x"

    assert metadata == Metadata.from_dict({"salesforce_id": "ABCD1234"})
    assert metadata == {"salesforce_id": "ABCD1234"}
    assert "other" not in metadata
    assert repr(metadata) == "Metadata({'salesforce_id': 'ABCD1234'})"
