import fnmatch

import pytest


class MemoryCache:
    """Stands in for RedisCache, keeping values in a dict"""

    def __init__(self):
        self.store = {}
        self.hits = 0

    def get_cache(self, key):
        if key in self.store:
            self.hits += 1
        return self.store.get(key)

    def set_cache(self, key, value, expire):
        self.store[key] = value
        return True

    def delete_pattern(self, pattern):
        keys = [key for key in self.store if fnmatch.fnmatchcase(key, pattern)]
        for key in keys:
            del self.store[key]
        return len(keys)


@pytest.fixture
def cache(app, client):
    memory_cache = MemoryCache()
    app.state.cache = memory_cache
    return memory_cache


def test_search_results_are_cached(upload, client, cache):
    upload("Foo.mp3")

    first = client.get("/songs/search", params={"title": "FOO"}).json()
    second = client.get("/songs/search", params={"title": "foo"}).json()

    assert first == second
    assert cache.store["search:foo"] == first
    assert cache.hits == 1


def test_full_listing_uses_its_own_key(upload, client, cache):
    upload("a.mp3")

    client.get("/songs/search")

    assert [song["title"] for song in cache.store["search:__all__"]] == ["a"]


def test_upload_clears_cached_searches(upload, client, cache):
    upload("a.mp3")
    client.get("/songs/search")
    assert "search:__all__" in cache.store

    upload("b.mp3")

    assert "search:__all__" not in cache.store
    titles = [song["title"] for song in client.get("/songs/search").json()]
    assert titles == ["a", "b"]


def test_duplicate_only_upload_keeps_cache(upload, client, cache):
    upload("a.mp3")
    client.get("/songs/search")

    assert upload("a.mp3").status_code == 400

    assert "search:__all__" in cache.store


def test_song_deletion_clears_cached_searches(upload, client, cache):
    upload("a.mp3", "b.mp3")
    client.get("/songs/search", params={"title": "a"})
    assert "search:a" in cache.store

    client.delete("/songs/delete/a")

    assert "search:a" not in cache.store
    assert client.get("/songs/search", params={"title": "a"}).json() == []
