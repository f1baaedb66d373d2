# backend/tests/test_notion_client.py

import json

import httpx
import pytest

from movie_fill.notion.client import (
    NotionAuthError,
    NotionClient,
    NotionClientError,
    NotionNotFoundError,
)
from movie_fill.notion.config import NotionConfig, get_notion_config


def create_client() -> NotionClient:
    return NotionClient(config=NotionConfig(api_key="dummy-key"))


def test_retrieve_page_success(monkeypatch):
    client = create_client()
    captured = {}

    fake_page = {
        "id": "page-1",
        "properties": {
            "제목": {"type": "title", "title": [{"plain_text": "Die Hard"}]},
        },
    }

    def fake_get(url, *args, **kwargs):
        captured["url"] = url
        captured["headers"] = kwargs.get("headers")
        return httpx.Response(
            status_code=200,
            content=json.dumps(fake_page).encode("utf-8"),
        )

    monkeypatch.setattr(httpx, "get", fake_get)

    page = client.retrieve_page("page-1")

    assert page["id"] == "page-1"
    assert captured["url"] == "https://api.notion.com/v1/pages/page-1"
    assert captured["headers"]["Authorization"] == "Bearer dummy-key"
    assert captured["headers"]["Notion-Version"] == "2022-06-28"


def test_retrieve_page_401(monkeypatch):
    client = create_client()

    def fake_get(*args, **kwargs):
        return httpx.Response(status_code=401, content=b"")

    monkeypatch.setattr(httpx, "get", fake_get)

    with pytest.raises(NotionAuthError):
        client.retrieve_page("page-1")


def test_retrieve_page_404(monkeypatch):
    client = create_client()

    def fake_get(*args, **kwargs):
        return httpx.Response(status_code=404, content=b"{}")

    monkeypatch.setattr(httpx, "get", fake_get)

    with pytest.raises(NotionNotFoundError):
        client.retrieve_page("missing-page")


def test_retrieve_page_network_error(monkeypatch):
    client = create_client()

    def fake_get(*args, **kwargs):
        raise httpx.RequestError("network error", request=None)

    monkeypatch.setattr(httpx, "get", fake_get)

    with pytest.raises(NotionClientError):
        client.retrieve_page("page-1")


def test_update_page_properties_sends_patch(monkeypatch):
    client = create_client()
    captured = {}

    def fake_patch(url, *args, **kwargs):
        captured["url"] = url
        captured["json"] = kwargs.get("json")
        return httpx.Response(status_code=200, content=b"{}")

    monkeypatch.setattr(httpx, "patch", fake_patch)

    properties = {"감독": {"rich_text": [{"type": "text", "text": {"content": "x"}}]}}
    client.update_page_properties("page-1", properties)

    assert captured["url"] == "https://api.notion.com/v1/pages/page-1"
    assert captured["json"] == {"properties": properties}


def test_update_page_properties_403(monkeypatch):
    client = create_client()

    monkeypatch.setattr(
        httpx,
        "patch",
        lambda *args, **kwargs: httpx.Response(status_code=403, content=b""),
    )

    with pytest.raises(NotionAuthError):
        client.update_page_properties("page-1", {})


def test_get_notion_config_reads_env(monkeypatch):
    monkeypatch.setenv("NOTION_TOKEN", "secret-from-env")
    monkeypatch.setenv("NOTION_TITLE_PROPERTY", "Name")
    monkeypatch.setenv("NOTION_STATUS_PROPERTY", "")
    get_notion_config.cache_clear()

    try:
        config = get_notion_config()
    finally:
        get_notion_config.cache_clear()

    assert config.api_key == "secret-from-env"
    assert config.title_property == "Name"
    assert config.status_property is None
    assert config.status_done == "완료"


def test_get_notion_config_status_property_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("NOTION_STATUS_PROPERTY", raising=False)
    get_notion_config.cache_clear()

    try:
        config = get_notion_config()
    finally:
        get_notion_config.cache_clear()

    assert config.status_property == "상태"
