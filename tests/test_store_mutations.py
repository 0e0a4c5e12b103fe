from __future__ import annotations

import pytest

from quickyaml import QuickYAML, TypeMismatchError


def test_example_scenario(yaml_path):
    db = QuickYAML(yaml_path)

    db.set("name", "John")
    db.set("age", 24)
    assert db.get("name") == "John"
    assert db.get("age") == 24
    assert db.has("hobbies") is False

    db.delete("name")
    assert db.get("name") is None
    assert db.keys() == ["age"]

    # a second store on the same file sees what the first one wrote
    assert QuickYAML(yaml_path).to_dict() == {"age": 24}


def test_set_overwrites_without_merging_and_chains(yaml_path):
    db = QuickYAML(yaml_path)

    db.set("profile", {"name": "John", "tags": ["a"]}).set("profile", {"age": 3})

    assert db.get("profile") == {"age": 3}


def test_set_rejects_values_yaml_cannot_hold(yaml_path, write_log):
    db = QuickYAML(yaml_path)

    with pytest.raises(TypeMismatchError):
        db.set("when", object())
    with pytest.raises(TypeMismatchError):
        db.set("nested", {"ok": [1, {2, 3}]})

    assert write_log == []
    assert yaml_path.read_text(encoding="utf-8") == ""


def test_delete_missing_variable_does_not_write(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("a", 1)
    write_log.clear()

    db.delete("nope")

    assert write_log == []
    assert db.to_dict() == {"a": 1}


def test_delete_last_variable_leaves_empty_file(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("a", 1)

    db.delete("a")

    assert yaml_path.read_bytes() == b""
    assert db.size == 0


def test_clear_twice_leaves_zero_length_file(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("a", 1).set("b", [1, 2])

    db.clear()
    assert yaml_path.stat().st_size == 0
    assert db.to_dict() == {}

    db.clear()
    assert yaml_path.stat().st_size == 0
    assert db.to_dict() == {}


def test_purge_writes_once_and_keeps_other_keys(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("a", 1).set("c", 3)
    write_log.clear()

    removed = db.purge("a", "b")

    assert removed == 1
    assert len(write_log) == 1
    assert db.to_dict() == {"c": 3}


def test_purge_without_matches_does_not_write(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("a", 1)
    write_log.clear()

    assert db.purge("x", "y") == 0
    assert db.purge() == 0
    assert write_log == []


def test_push_and_pull_languages(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("languages", ["English", "French"])

    assert db.push("languages", "German") == 3
    assert db.pull("languages", "French") == 2
    assert db.get("languages") == ["English", "German"]
    assert ["English", "German"] in db.values()


def test_push_then_pull_restores_original(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("xs", [1, "two", {"three": 3}])

    db.push("xs", 4, [5, 6], {"seven": [7]})
    db.pull("xs", 4, [5, 6], {"seven": [7]})

    assert db.get("xs") == [1, "two", {"three": 3}]


def test_push_preserves_argument_order(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("xs", [])

    assert db.push("xs", "a", "b", "c") == 3
    assert db.get("xs") == ["a", "b", "c"]


def test_pull_removes_every_occurrence(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("xs", ["a", "b", "a", {"k": 1}, "c", {"k": 1}])

    assert db.pull("xs", "a", {"k": 1}) == 2
    assert db.get("xs") == ["b", "c"]


def test_pull_keeps_booleans_distinct_from_numbers(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("xs", [True, 1, 1.0, 0, False])

    assert db.pull("xs", 1) == 3
    assert db.get("xs") == [True, 0, False]


def test_pull_without_match_still_writes_once(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("xs", ["a"])
    write_log.clear()

    assert db.pull("xs", "zzz") == 1
    assert len(write_log) == 1


def test_push_pull_on_missing_variable_return_minus_one_without_writing(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("other", 1)
    before = yaml_path.read_bytes()
    write_log.clear()

    assert db.push("missing", "x") == -1
    assert db.pull("missing", "x") == -1

    assert write_log == []
    assert yaml_path.read_bytes() == before


def test_push_pull_on_non_sequence_raise_type_mismatch(yaml_path, write_log):
    db = QuickYAML(yaml_path)
    db.set("name", "John")
    write_log.clear()

    with pytest.raises(TypeMismatchError) as exc:
        db.push("name", "x")
    assert exc.value.variable == "name"

    with pytest.raises(TypeMismatchError):
        db.pull("name", "J")

    assert write_log == []
    assert db.get("name") == "John"


def test_mutating_returned_values_does_not_touch_store(yaml_path):
    db = QuickYAML(yaml_path)
    db.set("xs", [1, 2])

    got = db.get("xs")
    got.append(3)

    assert db.get("xs") == [1, 2]


def test_mutations_without_cache(yaml_path):
    db = QuickYAML(yaml_path, {"cache": False})
    assert db.cache_enabled is False

    db.set("xs", ["a"])
    assert db.push("xs", "b") == 2

    # an edit made behind the store's back is visible immediately without a cache
    yaml_path.write_text("xs: [z]\n", encoding="utf-8")
    assert db.get("xs") == ["z"]
