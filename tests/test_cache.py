"""Tests for the result cache."""

from tone_picker.services.cache import ResultCache, make_key


class TestMakeKey:
    def test_includes_coordinates(self):
        assert make_key("hello", 1, 2) == "hello_1_2"
        assert make_key("hello", 1, 2) != make_key("hello", 2, 1)

    def test_long_texts_sharing_a_prefix_collide(self):
        prefix = "a" * 100
        assert make_key(prefix + "first", 0, 0) == make_key(prefix + "second", 0, 0)

    def test_custom_prefix_length(self):
        assert make_key("abcdef", 0, 1, prefix_length=3) == "abc_0_1"


class TestResultCache:
    def test_put_and_get(self, cache):
        cache.put("k", "value")
        entry = cache.get("k")
        assert entry is not None
        assert entry.result_text == "value"
        assert entry.key == "k"

    def test_get_missing(self, cache):
        assert cache.get("nope") is None

    def test_overwrite_replaces_entry(self, cache, clock):
        first = cache.put("k", "one")
        clock.advance(10)
        cache.put("k", "two")
        entry = cache.get("k")
        assert entry.result_text == "two"
        assert entry.created_at == first.created_at + 10
        assert len(cache) == 1

    def test_entry_expires_on_read(self, cache, clock):
        cache.put("k", "value")
        clock.advance(299)
        assert cache.get("k") is not None
        clock.advance(1)
        assert cache.get("k") is None
        # still stored until the next sweep
        assert len(cache) == 1

    def test_put_sweeps_expired_entries(self, cache, clock):
        cache.put("old", "value")
        clock.advance(301)
        cache.put("new", "value")
        assert len(cache) == 1
        assert cache.get("new") is not None

    def test_sweep_returns_removed_count(self, cache, clock):
        cache.put("a", "1")
        cache.put("b", "2")
        clock.advance(400)
        assert cache.sweep() == 2
        assert len(cache) == 0

    def test_clear(self, cache):
        cache.put("a", "1")
        cache.clear()
        assert len(cache) == 0

    def test_instances_are_isolated(self, clock):
        one = ResultCache(clock=clock)
        two = ResultCache(clock=clock)
        one.put("k", "v")
        assert two.get("k") is None
