"""Shared fixtures: an in-memory transport and sample catalog payloads."""

from pathlib import Path

import pytest

from acnh_cli.api import endpoints
from acnh_cli.client import AcnhClient


class FakeTransport:
    """
    Stands in for AcnhAPIClient.

    `responses` maps a path template (bulk endpoints) or a
    `(path_template, id)` tuple (per-record endpoints) to either a payload or
    an exception to raise. Every call is recorded in `calls`.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def _lookup(self, path_template, path_params, default=None):
        key = (path_template, *path_params.values()) if path_params else path_template
        result = self.responses.get(key, default)
        if result is None:
            raise KeyError(f"No fake response for {key}")
        if isinstance(result, Exception):
            raise result
        return result

    async def get_json(self, path_template, **path_params):
        self.calls.append(("get_json", path_template, path_params))
        return self._lookup(path_template, path_params)

    async def download_to(self, path_template, output_path, **path_params):
        self.calls.append(("download_to", path_template, output_path, path_params))
        body = self._lookup(path_template, path_params, default=b"ID3 fake mp3")
        Path(output_path).write_bytes(body)

    async def close(self):
        self.closed = True


def bgm_entry(track_id, hour, weather, file_name=None):
    return {
        "id": track_id,
        "file-name": file_name or f"track{track_id}",
        "hour": hour,
        "weather": weather,
        "music_uri": f"https://acnhapi.com/v1/hourly/{track_id}",
    }


def song_entry(song_id, name, file_name=None):
    return {
        "id": song_id,
        "file-name": file_name or f"song{song_id}",
        "name": {"name-USen": name, "name-EUen": name},
        "buy-price": 3200,
        "sell-price": 800,
        "isOrderable": True,
        "music_uri": f"https://acnhapi.com/v1/music/{song_id}",
        "image_uri": f"https://acnhapi.com/v1/images/songs/{song_id}",
    }


@pytest.fixture
def bgm_payload():
    return {
        "BGM_24Hour_18_Rainy": bgm_entry(1, 18, "Rainy"),
        "BGM_24Hour_18_Sunny": bgm_entry(2, 18, "Sunny"),
    }


@pytest.fixture
def song_payload():
    return {
        "K.K. Bossa": song_entry(10, "K.K. Bossa"),
        "Bubblegum K.K.": song_entry(11, "Bubblegum K.K."),
    }


@pytest.fixture
def transport(bgm_payload, song_payload):
    return FakeTransport(
        {
            endpoints.BGM_LIST: bgm_payload,
            endpoints.SONG_LIST: song_payload,
        }
    )


@pytest.fixture
def client(transport):
    return AcnhClient(transport=transport)
