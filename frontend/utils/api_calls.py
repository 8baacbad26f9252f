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

"""
Bridge between Streamlit reruns and the fetch-state hook.

Streamlit re-executes the page script from the top on every interaction, so a
widget's `FetchStateHook` lives in `st.session_state` under a per-widget key and
is asked to `observe` the widget's current locator on every run. The hook only
issues a request when that locator changed since the previous run.

The page script is synchronous; each run drives the hook on a short-lived event
loop and waits for the request to settle before the widget renders, showing a
loading message in the meantime.
"""
import asyncio
import logging

import streamlit as st

from search_widgets.config import WidgetSettings
from search_widgets.fetch_state import FetchState, FetchStateHook, Locator

logger = logging.getLogger(__name__)

HOOK_KEY_PREFIX = "fetch_hook_"


def get_settings() -> WidgetSettings:
    """
    Settings for this browser session. Loaded from the environment once, after
    which the sidebar may override the Giphy API key in `st.session_state`.
    """
    if 'widget_settings' not in st.session_state:
        st.session_state.widget_settings = WidgetSettings.from_env()
    return st.session_state.widget_settings


def get_fetch_hook(key: str) -> FetchStateHook:
    """Return the hook for widget `key`, creating it on first use."""
    state_key = f"{HOOK_KEY_PREFIX}{key}"
    if state_key not in st.session_state:
        logger.debug(f"Creating fetch hook for '{key}'")
        st.session_state[state_key] = FetchStateHook(timeout=get_settings().fetch_timeout)
    return st.session_state[state_key]


def use_fetch(key: str, locator: Locator, loading_message: str = "⏳ Loading...") -> FetchState:
    """
    Observe `locator` with the widget's hook and return the settled state.

    Args:
        key (str): Identifies the widget; each key owns one independent hook.
        locator (Locator): URL to fetch, or NO_REQUEST.
        loading_message (str): Shown while a request is in flight.

    Returns:
        FetchState: data / loading / error after any request for `locator`
            has completed.
    """
    hook = get_fetch_hook(key)
    status_placeholder = st.empty()

    async def _observe() -> FetchState:
        state = hook.observe(locator)
        if hook.in_flight:
            status_placeholder.info(loading_message)
            state = await hook.settle()
        return state

    try:
        return asyncio.run(_observe())
    finally:
        status_placeholder.empty()


def release_fetch(key: str):
    """Close and forget the hook of a widget that is no longer on the page."""
    hook = st.session_state.pop(f"{HOOK_KEY_PREFIX}{key}", None)
    if hook is not None:
        logger.debug(f"Releasing fetch hook for '{key}'")
        hook.close()
