import os


def test_upload_inserts_songs_and_stores_blobs(upload, upload_dir):
    response = upload("Road Song.mp3", "other.flac")

    assert response.status_code == 200
    body = response.json()
    assert [song["title"] for song in body] == ["Road Song", "other"]
    assert [song["filename"] for song in body] == ["Road Song.mp3", "other.flac"]
    assert all(isinstance(song["id"], int) for song in body)
    assert os.path.isfile(os.path.join(upload_dir, "Road Song.mp3"))
    assert os.path.isfile(os.path.join(upload_dir, "other.flac"))


def test_duplicate_filename_is_skipped(upload, client):
    assert upload("a.mp3").status_code == 200

    response = upload("a.mp3", "b.mp3")

    assert response.status_code == 200
    assert [song["filename"] for song in response.json()] == ["b.mp3"]
    songs = client.get("/songs/search").json()
    assert sorted(song["filename"] for song in songs) == ["a.mp3", "b.mp3"]


def test_sole_duplicate_reports_client_error(upload, client):
    upload("a.mp3")

    response = upload("a.mp3")

    assert response.status_code == 400
    assert response.json()["detail"] == "Uploaded song(s) already exist"
    assert len(client.get("/songs/search").json()) == 1


def test_duplicate_within_one_batch_inserts_once(upload, client):
    response = upload("twice.mp3", "twice.mp3")

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert len(client.get("/songs/search").json()) == 1


def test_reupload_replaces_blob_bytes(client, upload_dir):
    client.post("/upload", files=[("file", ("a.mp3", b"first", "audio/mpeg"))])

    response = client.post("/upload", files=[("file", ("a.mp3", b"second", "audio/mpeg"))])

    assert response.status_code == 400
    with open(os.path.join(upload_dir, "a.mp3"), "rb") as f:
        assert f.read() == b"second"


def test_oversized_file_rejects_whole_batch(client, upload_dir):
    response = client.post(
        "/upload",
        files=[
            ("file", ("small.mp3", b"x" * 10, "audio/mpeg")),
            ("file", ("big.mp3", b"x" * 2048, "audio/mpeg")),
        ],
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("File is too large")
    assert client.get("/songs/search").json() == []
    assert os.listdir(upload_dir) == []


def test_disallowed_type_is_rejected(client):
    response = client.post("/upload", files=[("file", ("notes.txt", b"hello", "text/plain"))])

    assert response.status_code == 400
    assert response.json()["detail"] == "Only audio files are allowed!"
    assert client.get("/songs/search").json() == []


def test_wav_is_accepted(client):
    response = client.post("/upload", files=[("file", ("take.wav", b"RIFF", "audio/wav"))])

    assert response.status_code == 200
    assert response.json()[0]["title"] == "take"


def test_missing_files_is_client_error(client):
    response = client.post("/upload")

    assert response.status_code == 400
    assert response.json()["detail"] == "No file(s) uploaded"


def test_too_many_files_is_client_error(upload, client):
    response = upload("1.mp3", "2.mp3", "3.mp3", "4.mp3")

    assert response.status_code == 400
    assert client.get("/songs/search").json() == []


def test_client_directories_are_stripped(client, upload_dir):
    response = client.post("/upload", files=[("file", ("../../evil.mp3", b"x", "audio/mpeg"))])

    assert response.status_code == 200
    assert response.json()[0]["filename"] == "evil.mp3"
    assert os.path.isfile(os.path.join(upload_dir, "evil.mp3"))


def test_uploaded_blob_is_served_statically(upload, client):
    upload("served.mp3")

    response = client.get("/uploads/served.mp3")

    assert response.status_code == 200
    assert response.content == b"ID3 fake audio"


def test_dot_filenames_reject_whole_batch(client, upload_dir):
    response = client.post(
        "/upload",
        files=[
            ("file", ("ok.mp3", b"x", "audio/mpeg")),
            ("file", ("..", b"x", "audio/mpeg")),
        ],
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid file name"
    assert os.listdir(upload_dir) == []
    assert client.get("/songs/search").json() == []
