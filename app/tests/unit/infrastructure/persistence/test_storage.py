"""Unit tests for infrastructure.persistence.storage module."""

import json

import pytest

from infrastructure.persistence import InMemoryStorage, JSONFileStorage


@pytest.mark.unit
class TestInMemoryStorage:
    """Test suite for InMemoryStorage."""

    def test_read_missing(self):
        assert InMemoryStorage().read("missing") is None

    def test_write_and_read(self):
        storage = InMemoryStorage()
        storage.write("futureup-lms-locale", "ru")
        assert storage.read("futureup-lms-locale") == "ru"

    def test_initial_values_are_copied(self):
        initial = {"a": "1"}
        storage = InMemoryStorage(initial)
        storage.write("b", "2")
        assert initial == {"a": "1"}
        assert sorted(storage.keys()) == ["a", "b"]

    def test_remove(self):
        storage = InMemoryStorage({"a": "1"})
        storage.remove("a")
        storage.remove("never-there")
        assert storage.read("a") is None


@pytest.mark.unit
class TestJSONFileStorage:
    """Test suite for JSONFileStorage."""

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "nested" / "storage.json"

    def test_missing_file_reads_empty(self, path):
        storage = JSONFileStorage(path)
        assert storage.read("futureup-lms-locale") is None
        assert storage.keys() == []

    def test_write_creates_file(self, path):
        JSONFileStorage(path).write("futureup-lms-locale", "en")
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "futureup-lms-locale": "en"
        }

    def test_writes_visible_to_other_instances(self, path):
        JSONFileStorage(path).write("futureup-admin-locale", "ru")
        assert JSONFileStorage(path).read("futureup-admin-locale") == "ru"

    def test_keys_are_independent(self, path):
        storage = JSONFileStorage(path)
        storage.write("futureup-admin-locale", "ru")
        storage.write("futureup-lms-locale", "en")
        assert storage.read("futureup-admin-locale") == "ru"
        assert sorted(storage.keys()) == ["futureup-admin-locale", "futureup-lms-locale"]

    def test_remove(self, path):
        storage = JSONFileStorage(path)
        storage.write("a", "1")
        storage.remove("a")
        storage.remove("a")
        assert storage.read("a") is None

    def test_corrupt_file_reads_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        storage = JSONFileStorage(path)
        assert storage.read("a") is None
        storage.write("a", "1")
        assert storage.read("a") == "1"

    def test_non_object_file_reads_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text('["ru"]', encoding="utf-8")
        assert JSONFileStorage(path).keys() == []

    def test_non_string_values_ignored(self, path):
        path.parent.mkdir(parents=True)
        path.write_text('{"a": 1, "b": "ru"}', encoding="utf-8")
        assert JSONFileStorage(path).keys() == ["b"]

    def test_no_temp_files_left(self, path):
        JSONFileStorage(path).write("a", "1")
        assert [p.name for p in path.parent.iterdir()] == ["storage.json"]
