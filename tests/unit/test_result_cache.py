"""Unit tests for the disk result cache."""

import os
import time

import pytest

from utils.result_cache import ResultCache


@pytest.fixture
def cache(tmp_path) -> ResultCache:
    return ResultCache(cache_dir=tmp_path / "cache", ttl_seconds=60)


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "contract.txt"
    path.write_text("The supplier shall deliver the goods.", encoding="utf-8")
    return path


def age_file(path, seconds: int) -> None:
    past = time.time() - seconds
    os.utime(path, (past, past))


class TestCacheKey:
    """Tests for cache key derivation."""

    def test_key_is_stable(self, source_file):
        options = {"max_sentences": 5, "language": "en"}

        assert ResultCache.cache_key(source_file, options) == ResultCache.cache_key(str(source_file), dict(options))
        assert len(ResultCache.cache_key(source_file, options)) == 64

    def test_key_depends_on_options(self, source_file):
        assert ResultCache.cache_key(source_file, {"max_sentences": 5}) != ResultCache.cache_key(source_file, {"max_sentences": 3})

    def test_key_depends_on_file_state(self, source_file):
        before = ResultCache.cache_key(source_file, {})

        source_file.write_text("The supplier shall deliver the goods and services.", encoding="utf-8")

        assert ResultCache.cache_key(source_file, {}) != before


class TestGetAndSet:
    """Tests for storing and retrieving values."""

    def test_miss_on_empty_cache(self, cache):
        assert cache.get("unknown") is None

    def test_round_trip(self, cache):
        value = {"plain_text": "summary", "key_points": ["Contains payment terms"]}

        assert cache.set("abc", value) is True
        assert cache.get("abc") == value

    def test_expired_entry_is_a_miss(self, cache):
        cache.set("abc", {"value": 1})
        age_file(cache.cache_dir / "abc.pkl", 120)

        assert cache.get("abc") is None

    def test_corrupt_entry_is_a_miss(self, cache):
        cache.cache_dir.mkdir(parents=True)
        (cache.cache_dir / "abc.pkl").write_bytes(b"not a pickle")

        assert cache.get("abc") is None


class TestMaintenance:
    """Tests for cleanup and statistics."""

    def test_clear_expired(self, cache):
        cache.set("old", 1)
        cache.set("new", 2)
        age_file(cache.cache_dir / "old.pkl", 120)

        assert cache.clear_expired() == 1
        assert cache.get("new") == 2

    def test_clear_all(self, cache):
        cache.set("one", 1)
        cache.set("two", 2)

        assert cache.clear_all() == 2
        assert cache.get_stats()["total_files"] == 0

    def test_stats(self, cache):
        assert cache.get_stats()["total_files"] == 0

        cache.set("one", 1)
        stats = cache.get_stats()

        assert stats["total_files"] == 1
        assert stats["expired_files"] == 0
        assert stats["ttl_seconds"] == 60
        assert stats["cache_dir"] == str(cache.cache_dir)

    def test_operations_on_missing_directory(self, tmp_path):
        cache = ResultCache(cache_dir=tmp_path / "never_created")

        assert cache.clear_expired() == 0
        assert cache.clear_all() == 0
