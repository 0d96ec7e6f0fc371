"""
Path templates for the API endpoints used by each catalog variant.

Placeholders are filled in by the transport; `api_version` always comes from
the client configuration.
"""

BGM_LIST = "/v{api_version}/backgroundmusic"
BGM_ITEM = "/v{api_version}/backgroundmusic/{track_id}"
BGM_ASSET = "/v{api_version}/hourly/{track_id}"

SONG_LIST = "/v{api_version}/songs"
SONG_ITEM = "/v{api_version}/songs/{song_id}"
SONG_ASSET = "/v{api_version}/music/{song_id}"
