"""Tests for downloading record assets."""

import tempfile

import pytest

from acnh_cli.api import endpoints
from acnh_cli.exceptions import RemoteError, TransportError, ValidationError
from acnh_cli.models import BGMTrack, Song
from acnh_cli.utils.path import system_temp_dir
from tests.conftest import bgm_entry, song_entry


@pytest.fixture
def track():
    return BGMTrack.model_validate(bgm_entry(1, 18, "Rainy", file_name="BGM_24Hour_18_Rainy"))


@pytest.fixture
def song():
    return Song.model_validate(song_entry(10, "K.K. Bossa", file_name="K.K.Bossa"))


@pytest.mark.asyncio
async def test_bgm_download_writes_to_derived_path(client, transport, track, tmp_path):
    path = await client.bgm.download(track, str(tmp_path))

    assert path == f"{tmp_path}/BGM_24Hour_18_Rainy.mp3"
    assert (tmp_path / "BGM_24Hour_18_Rainy.mp3").read_bytes() == b"ID3 fake mp3"
    assert transport.calls == [
        ("download_to", endpoints.BGM_ASSET, path, {"track_id": 1})
    ]


@pytest.mark.asyncio
async def test_song_download_uses_music_endpoint(client, transport, song, tmp_path):
    transport.responses[(endpoints.SONG_ASSET, 10)] = b"bossa"

    path = await client.songs.download(song, tmp_path)

    assert path == f"{tmp_path}/K.K.Bossa.mp3"
    assert (tmp_path / "K.K.Bossa.mp3").read_bytes() == b"bossa"
    assert transport.calls[0][1] == endpoints.SONG_ASSET
    assert transport.calls[0][3] == {"song_id": 10}


@pytest.mark.asyncio
async def test_missing_directory_fails_before_any_request(
    client, transport, track, tmp_path
):
    missing = tmp_path / "nope"

    with pytest.raises(ValidationError, match="directory does not exist"):
        await client.bgm.download(track, str(missing))

    assert transport.calls == []
    assert not missing.exists()


@pytest.mark.asyncio
async def test_file_is_not_a_directory(client, transport, track, tmp_path):
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x")

    with pytest.raises(ValidationError):
        await client.bgm.download(track, str(not_a_dir))
    assert transport.calls == []


@pytest.mark.asyncio
async def test_unsafe_file_name_is_rejected(client, transport, tmp_path):
    evil = Song.model_validate(song_entry(66, "Evil", file_name="../escape"))

    with pytest.raises(ValidationError):
        await client.songs.download(evil, str(tmp_path))
    assert transport.calls == []


@pytest.mark.asyncio
async def test_remote_error_propagates(client, transport, track, tmp_path):
    transport.responses[(endpoints.BGM_ASSET, 1)] = RemoteError(404)

    with pytest.raises(RemoteError):
        await client.bgm.download(track, str(tmp_path))


@pytest.mark.asyncio
async def test_transport_error_propagates(client, transport, song, tmp_path):
    transport.responses[(endpoints.SONG_ASSET, 10)] = TransportError("reset")

    with pytest.raises(TransportError):
        await client.songs.download(song, str(tmp_path))


@pytest.mark.asyncio
async def test_download_to_temp(client, track, tmp_path, monkeypatch):
    monkeypatch.setattr(
        "acnh_cli.catalog.resolver.system_temp_dir", lambda: str(tmp_path)
    )

    path = await client.bgm.download_to_temp(track)

    assert path == f"{tmp_path}/BGM_24Hour_18_Rainy.mp3"
    assert (tmp_path / "BGM_24Hour_18_Rainy.mp3").exists()


@pytest.mark.asyncio
async def test_song_download_to_temp(client, song, tmp_path, monkeypatch):
    monkeypatch.setattr(
        "acnh_cli.catalog.resolver.system_temp_dir", lambda: str(tmp_path)
    )
    assert await client.songs.download_to_temp(song) == f"{tmp_path}/K.K.Bossa.mp3"


def test_system_temp_dir():
    assert system_temp_dir() == tempfile.gettempdir()
