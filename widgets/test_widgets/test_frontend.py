# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import asyncio
import json
import threading
from collections import Counter
from pathlib import Path
from types import SimpleNamespace

import pytest
from aiohttp import web
from streamlit.testing.v1 import AppTest

APP_PATH = "../../frontend/app.py"
TEST_KEY = "test-key"


def load_fixture(name):
    p = Path(__file__).parent.joinpath(name)
    with open(p, "r") as f:
        return json.load(f)


@pytest.fixture
def mock_apis(unused_tcp_port, monkeypatch):
    """
    PokeAPI and Giphy stand-ins served from a background thread, since the
    Streamlit script runs synchronously and drives its own event loops.
    Hits are counted per Pokemon name and per `gifs:<query>`.
    """
    hits = Counter()

    async def pokemon(request):
        name = request.match_info["name"]
        hits[name] += 1
        payload = load_fixture("pikachu.json")
        payload["name"] = name
        return web.json_response(payload)

    async def gifs(request):
        hits[f"gifs:{request.query.get('q')}"] += 1
        if request.query.get("api_key") != TEST_KEY:
            return web.json_response({"meta": {"status": 401, "msg": "Unauthorized"}}, status=401)
        return web.json_response(load_fixture("giphy_search.json"))

    app = web.Application()
    app.add_routes([
        web.get("/api/v2/pokemon/{name}", pokemon),
        web.get("/v1/gifs/search", gifs),
    ])

    loop = asyncio.new_event_loop()
    runner = web.AppRunner(app)
    loop.run_until_complete(runner.setup())
    site = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
    loop.run_until_complete(site.start())
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()

    base = f"http://127.0.0.1:{unused_tcp_port}"
    monkeypatch.setenv("POKEAPI_BASE_URL", f"{base}/api/v2")
    monkeypatch.setenv("GIPHY_BASE_URL", f"{base}/v1")
    monkeypatch.setenv("GIPHY_API_KEY", TEST_KEY)
    monkeypatch.delenv("FETCH_TIMEOUT", raising=False)

    yield SimpleNamespace(hits=hits)

    asyncio.run_coroutine_threadsafe(runner.cleanup(), loop).result(timeout=5)
    loop.call_soon_threadsafe(loop.stop)
    thread.join(timeout=5)
    loop.close()


def pokemon_page():
    from components import render_pokemon_search

    render_pokemon_search()


def giphy_page():
    from components import render_giphy_search

    render_giphy_search()


def markdown_text(at):
    return [m.value for m in at.markdown]


def test_rerun_with_same_name_does_not_refetch(mock_apis):
    at = AppTest.from_function(pokemon_page).run(timeout=10)
    assert not at.exception
    assert mock_apis.hits["pikachu"] == 1
    assert "## Pikachu" in markdown_text(at)
    hook = at.session_state["fetch_hook_pokemon"]

    at.run(timeout=10)
    at.run(timeout=10)
    assert mock_apis.hits["pikachu"] == 1
    assert at.session_state["fetch_hook_pokemon"] is hook
    assert "## Pikachu" in markdown_text(at)


def test_changing_name_fetches_new_pokemon(mock_apis):
    at = AppTest.from_function(pokemon_page).run(timeout=10)
    at.text_input(key="pokemon_name_input").set_value("Eevee").run(timeout=10)

    assert not at.exception
    assert mock_apis.hits == Counter({"pikachu": 1, "eevee": 1})
    assert "## Eevee" in markdown_text(at)


def test_switching_widget_releases_hidden_hook(mock_apis):
    at = AppTest.from_file(APP_PATH).run(timeout=10)
    assert not at.exception
    hook = at.session_state["fetch_hook_pokemon"]
    assert not hook.closed

    at.radio(key="widget_radio_select").set_value("🎬 GIF Search").run(timeout=10)

    assert not at.exception
    assert hook.closed
    assert "fetch_hook_pokemon" not in at.session_state
    assert "fetch_hook_giphy" in at.session_state


def test_giphy_waits_for_first_submit(mock_apis):
    at = AppTest.from_function(giphy_page).run(timeout=10)

    assert not at.exception
    assert "### ⚙️ Configuration Required" in markdown_text(at)
    assert sum(mock_apis.hits.values()) == 0


def test_giphy_submit_then_blank_submit_keeps_term(mock_apis):
    at = AppTest.from_function(giphy_page).run(timeout=10)

    at.text_input(key="gif_search_input").set_value("dancing")
    at.button[0].click().run(timeout=10)
    assert not at.exception
    assert at.session_state["gif_search_term"] == "dancing"
    assert mock_apis.hits["gifs:dancing"] == 1
    assert "**Found 3 GIFs**" in markdown_text(at)

    at.text_input(key="gif_search_input").set_value("   ")
    at.button[0].click().run(timeout=10)
    assert not at.exception
    assert at.session_state["gif_search_term"] == "dancing"
    assert "Please enter something to search for." in [w.value for w in at.warning]
    assert mock_apis.hits["gifs:dancing"] == 1
    assert "**Found 3 GIFs**" in markdown_text(at)


def test_image_pages_render_without_warnings(mock_apis):
    # a deprecated image argument would surface as a warning element
    at = AppTest.from_function(pokemon_page).run(timeout=10)
    assert not at.exception
    assert "## Pikachu" in markdown_text(at)
    assert len(at.warning) == 0

    at = AppTest.from_function(giphy_page).run(timeout=10)
    at.text_input(key="gif_search_input").set_value("cats")
    at.button[0].click().run(timeout=10)
    assert not at.exception
    assert "**Found 3 GIFs**" in markdown_text(at)
    assert len(at.warning) == 0
