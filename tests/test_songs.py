import os


def test_search_without_title_returns_everything(upload, client):
    upload("Foo Fighters.mp3", "bar.mp3", "BigFOOT.flac")

    response = client.get("/songs/search")

    assert response.status_code == 200
    assert [song["title"] for song in response.json()] == ["Foo Fighters", "bar", "BigFOOT"]


def test_blank_title_returns_everything(upload, client):
    upload("one.mp3", "two.mp3")

    response = client.get("/songs/search", params={"title": "   "})

    assert len(response.json()) == 2


def test_search_is_case_insensitive_substring(upload, client):
    upload("Foo Fighters.mp3", "bar.mp3", "BigFOOT.flac")

    response = client.get("/songs/search", params={"title": "foo"})

    assert sorted(song["title"] for song in response.json()) == ["BigFOOT", "Foo Fighters"]


def test_search_with_no_match_is_empty(upload, client):
    upload("one.mp3")

    assert client.get("/songs/search", params={"title": "zzz"}).json() == []


def test_delete_song_removes_row_and_blob(upload, client, upload_dir):
    upload("gone.mp3", "kept.mp3")

    response = client.delete("/songs/delete/gone")

    assert response.status_code == 200
    assert response.json()["message"] == 'Song with title "gone" has been deleted successfully!'
    assert [song["title"] for song in client.get("/songs/search").json()] == ["kept"]
    assert not os.path.exists(os.path.join(upload_dir, "gone.mp3"))
    assert os.path.exists(os.path.join(upload_dir, "kept.mp3"))


def test_delete_song_without_blob_still_succeeds(upload, client, upload_dir):
    upload("orphan.mp3")
    os.remove(os.path.join(upload_dir, "orphan.mp3"))

    response = client.delete("/songs/delete/orphan")

    assert response.status_code == 200
    assert client.get("/songs/search").json() == []


def test_delete_missing_song_is_404_and_leaves_files(upload, client, upload_dir):
    upload("kept.mp3")

    response = client.delete("/songs/delete/nope")

    assert response.status_code == 404
    assert response.json()["detail"] == "Song not found"
    assert os.listdir(upload_dir) == ["kept.mp3"]


def test_delete_song_removes_its_memberships(upload, client):
    upload("tune.mp3")
    client.post("/playlists", json={"name": "Mix"})
    client.post("/playlists/Mix/add", json={"songTitle": "tune"})

    client.delete("/songs/delete/tune")

    response = client.get("/playlists/Mix/songs")
    assert response.status_code == 200
    assert response.json() == []


def test_title_with_spaces_round_trips_through_path(upload, client):
    upload("Long Road Home.mp3")

    response = client.delete("/songs/delete/Long Road Home")

    assert response.status_code == 200
