import json

import httpx
import pytest
import respx
from httpx import Response
from pydantic import SecretStr

from src.core.browser import BrowserbaseProvider, BrowserProviderConfigError, BrowserProviderError, Viewport
from src.core.config.schema import BrowserbaseConfig

BASE_URL = "https://api.browserbase.com/v1"


@pytest.fixture
def provider():
    return BrowserbaseProvider(api_key="bb_test_key", project_id="proj-1")


@pytest.mark.asyncio
async def test_create_session_payload(provider):
    async with respx.mock:
        route = respx.post(f"{BASE_URL}/sessions").mock(
            return_value=Response(201, json={"id": "sess-1", "status": "RUNNING"})
        )

        session = await provider.create_session()

        assert session.session_id == "sess-1"
        assert session.debug_url is None
        assert route.called

        request = route.calls.last.request
        assert request.headers["X-BB-API-Key"] == "bb_test_key"
        body = json.loads(request.content)
        assert body["projectId"] == "proj-1"
        settings = body["browserSettings"]
        assert settings["viewport"] == {"width": 1440, "height": 900}
        assert settings["fingerprint"]["screen"] == {
            "maxHeight": 900,
            "maxWidth": 1440,
            "minHeight": 900,
            "minWidth": 1440,
        }
        assert settings["blockAds"] is True


@pytest.mark.asyncio
async def test_create_session_http_error(provider):
    async with respx.mock:
        respx.post(f"{BASE_URL}/sessions").mock(return_value=Response(401, text="unauthorized"))

        with pytest.raises(BrowserProviderError) as exc_info:
            await provider.create_session()

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "unauthorized"


@pytest.mark.asyncio
async def test_create_session_without_id(provider):
    async with respx.mock:
        respx.post(f"{BASE_URL}/sessions").mock(return_value=Response(201, json={}))

        with pytest.raises(BrowserProviderError, match="session id"):
            await provider.create_session()


@pytest.mark.asyncio
async def test_create_session_connection_error(provider):
    async with respx.mock:
        respx.post(f"{BASE_URL}/sessions").mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(BrowserProviderError, match="failed"):
            await provider.create_session()


@pytest.mark.asyncio
async def test_get_debug_url(provider):
    async with respx.mock:
        respx.get(f"{BASE_URL}/sessions/sess-1/debug").mock(
            return_value=Response(
                200,
                json={
                    "debuggerFullscreenUrl": "https://live.example/fullscreen",
                    "debuggerUrl": "https://live.example/inspector",
                },
            )
        )

        assert await provider.get_debug_url("sess-1") == "https://live.example/fullscreen"


@pytest.mark.asyncio
async def test_get_debug_url_missing(provider):
    async with respx.mock:
        respx.get(f"{BASE_URL}/sessions/sess-1/debug").mock(return_value=Response(200, json={}))

        with pytest.raises(BrowserProviderError):
            await provider.get_debug_url("sess-1")


@pytest.mark.asyncio
async def test_close_session_requests_release(provider):
    async with respx.mock:
        route = respx.post(f"{BASE_URL}/sessions/sess-1").mock(return_value=Response(200, json={}))

        await provider.close_session("sess-1")

        content = json.loads(route.calls.last.request.content)
        assert content == {"projectId": "proj-1", "status": "REQUEST_RELEASE"}


@pytest.mark.asyncio
async def test_custom_viewport_and_base_url():
    provider = BrowserbaseProvider(
        api_key="k",
        project_id="p",
        base_url="https://bb.internal/v1/",
        block_ads=False,
        viewport=Viewport(width=800, height=600),
    )
    async with respx.mock:
        route = respx.post("https://bb.internal/v1/sessions").mock(return_value=Response(201, json={"id": "x"}))

        await provider.create_session()

        body = json.loads(route.calls.last.request.content)
        assert body["browserSettings"]["viewport"] == {"width": 800, "height": 600}
        assert body["browserSettings"]["blockAds"] is False


def test_missing_credentials_rejected():
    with pytest.raises(BrowserProviderConfigError):
        BrowserbaseProvider(api_key="", project_id="p")
    with pytest.raises(BrowserProviderConfigError):
        BrowserbaseProvider(api_key="k", project_id="")


def test_from_settings_prefers_config():
    config = BrowserbaseConfig(api_key=SecretStr("bb_live_cfg"), project_id="cfg-project")
    provider = BrowserbaseProvider.from_settings(config)
    assert provider._api_key == "bb_live_cfg"
    assert provider._project_id == "cfg-project"
    assert provider.viewport == Viewport(1440, 900)


def test_from_settings_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("BROWSERBASE_API_KEY", "bb_live_env")
    monkeypatch.setenv("BROWSERBASE_PROJECT_ID", "env-project")

    provider = BrowserbaseProvider.from_settings(BrowserbaseConfig())

    assert provider._api_key == "bb_live_env"
    assert provider._project_id == "env-project"


def test_from_settings_without_credentials():
    with pytest.raises(BrowserProviderConfigError):
        BrowserbaseProvider.from_settings(BrowserbaseConfig())


@pytest.mark.asyncio
async def test_non_json_body_raises_provider_error(provider):
    async with respx.mock:
        respx.post(f"{BASE_URL}/sessions/sess-1").mock(return_value=Response(200, text="<html>ok</html>"))

        with pytest.raises(BrowserProviderError, match="invalid JSON") as exc_info:
            await provider.close_session("sess-1")

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "<html>ok</html>"


@pytest.mark.asyncio
async def test_non_json_debug_body_raises_provider_error(provider):
    async with respx.mock:
        respx.get(f"{BASE_URL}/sessions/sess-1/debug").mock(return_value=Response(200, text="gateway page"))

        with pytest.raises(BrowserProviderError, match="invalid JSON"):
            await provider.get_debug_url("sess-1")
