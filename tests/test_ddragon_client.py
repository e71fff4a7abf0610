import asyncio

import httpx
import pytest

from ddragon_client import DDragonClient
from errors import EncodingFault, LookupFault, NetworkFault, ParseFault

BASE = "http://ddragon.test/cdn/6.24.1/data/en_US/champion"


def test_champion_url_uses_key_as_single_segment():
    client = DDragonClient(base_url=BASE + "/")
    assert client.champion_url("Ahri") == f"{BASE}/Ahri.json"
    assert client.champion_url("Lee Sin") == f"{BASE}/Lee%20Sin.json"
    assert client.champion_url("Kog'Maw") == f"{BASE}/Kog%27Maw.json"


@pytest.mark.parametrize("key", ["", None, ".", "..", "a/b", "../Ahri", "a\\b", "Ahri?x=1", "Ahri#lore", "Ah\nri", "Ah\ud800ri"])
def test_champion_url_rejects_path_breaking_keys(key):
    with pytest.raises(EncodingFault):
        DDragonClient(base_url=BASE).champion_url(key)


def test_default_base_url_comes_from_settings():
    client = DDragonClient()
    assert client.base_url == "http://ddragon.leagueoflegends.com/cdn/6.24.1/data/en_US/champion"


def test_zero_timeout_disables_timeout():
    assert DDragonClient(base_url=BASE, timeout=0).timeout is None
    assert DDragonClient(base_url=BASE, timeout=2.5).timeout == 2.5


def test_fetch_lore_returns_lore(feed):
    lore = asyncio.run(feed.client().fetch_lore("Ahri"))
    assert lore == "The Nine-Tailed Fox"
    assert feed.urls == [f"{BASE}/Ahri.json"]


def test_fetch_lore_missing_champion(feed):
    feed.payload = {"data": {}}
    with pytest.raises(LookupFault) as exc:
        asyncio.run(feed.client().fetch_lore("Nonexistent"))
    assert exc.value.key == "Nonexistent"


def test_encoding_fault_happens_before_any_request(feed):
    with pytest.raises(EncodingFault):
        asyncio.run(feed.client().fetch_champion("a/b"))
    assert feed.urls == []


def test_http_error_status_is_network_fault(feed):
    feed.status = 404
    feed.text = "Not Found"
    with pytest.raises(NetworkFault) as exc:
        asyncio.run(feed.client().fetch_champion("Ahri"))
    assert "404" in str(exc.value)


@pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ReadTimeout])
def test_transport_errors_are_network_faults(feed, error):
    feed.exc = error
    with pytest.raises(NetworkFault) as exc:
        asyncio.run(feed.client().fetch_champion("Ahri"))
    assert isinstance(exc.value.__cause__, error)


def test_invalid_json_is_parse_fault(feed):
    feed.text = "<html>oops</html>"
    with pytest.raises(ParseFault):
        asyncio.run(feed.client().fetch_champion("Ahri"))


def test_non_object_json_is_parse_fault(feed):
    feed.payload = ["Ahri"]
    with pytest.raises(ParseFault):
        asyncio.run(feed.client().fetch_champion("Ahri"))
