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

import streamlit as st
from streamlit_extras.stylable_container import stylable_container

from search_widgets.constants import DEFAULT_GIF_SEARCH, GIPHY_DASHBOARD_URL, PLACEHOLDER_API_KEY
from search_widgets.locators import giphy_search_locator, uses_placeholder_key
from search_widgets.view_models import GifGrid, WidgetView, build_gif_grid, select_view
from utils.api_calls import get_settings, use_fetch

FETCH_KEY = "giphy"
GRID_COLUMNS = 3


def _render_setup_help():
    with stylable_container(
        key="giphy-info-box",
        css_styles="""
            {
                border-left: 4px solid #7b61ff;
                border-radius: 8px;
                padding: 1rem 1.25rem;
                background-color: #f3f0ff;
            }
            """,
    ):
        st.markdown("### ⚙️ Configuration Required")
        st.markdown(
            f"""
1. Go to the [Giphy Dashboard]({GIPHY_DASHBOARD_URL})
2. Create a new app
3. Copy your API Key
4. Set `GIPHY_API_KEY` in your `.env` file (or paste it in the sidebar) in place of `{PLACEHOLDER_API_KEY}`
"""
        )


def _render_grid(grid: GifGrid):
    st.markdown(f"**{grid.count_label}**")
    for row_start in range(0, len(grid.cards), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, gif in zip(cols, grid.cards[row_start:row_start + GRID_COLUMNS]):
            with col:
                with stylable_container(
                    key=f"gif-card-{row_start}-{gif.id}",
                    css_styles="""
                        {
                            border-radius: 12px;
                            padding: 0.5rem;
                            background-color: #fafafa;
                            box-shadow: 0 2px 6px rgba(0, 0, 0, 0.08);
                        }
                        """,
                ):
                    if gif.image_url:
                        st.image(gif.image_url, width="stretch")
                    if gif.page_url:
                        st.markdown(f"[{gif.title}]({gif.page_url})")
                    else:
                        st.caption(gif.title)


def render_giphy_search():
    """
    Renders the GIF search widget.

    Nothing is requested until the search form has been submitted once; until
    then a configuration panel explains how to provision a Giphy API key. After
    the first submission the search follows the submitted term. The request
    fails with an authorization error while the key is still the placeholder.
    """
    if 'gif_search_term' not in st.session_state:
        st.session_state.gif_search_term = DEFAULT_GIF_SEARCH
    if 'gif_search_submitted' not in st.session_state:
        st.session_state.gif_search_submitted = False

    st.markdown("# 🎬 GIF Search")
    st.caption("Search GIFs with the Giphy API")

    settings = get_settings()
    if uses_placeholder_key(settings.giphy_api_key):
        st.warning("No Giphy API key configured; searches will be rejected until one is set.")

    with st.form(key="giphy_search_form", border=False):
        term = st.text_input(
            "Search:",
            value=st.session_state.gif_search_term,
            placeholder="Search for a GIF (e.g. funny cats, dancing)",
            key="gif_search_input",
        )
        submitted = st.form_submit_button("Search", type="primary")
        if submitted:
            if term.strip():
                st.session_state.gif_search_term = term
                st.session_state.gif_search_submitted = True
            else:
                st.warning("Please enter something to search for.")

    locator = giphy_search_locator(
        st.session_state.gif_search_term,
        submitted=st.session_state.gif_search_submitted,
        settings=settings,
    )
    state = use_fetch(FETCH_KEY, locator, loading_message="⏳ Loading GIFs...")

    view = select_view(locator, state)
    if view is WidgetView.HELP:
        _render_setup_help()
    elif view is WidgetView.ERROR:
        st.error(f"❌ Error: {state.error}")
    elif view is WidgetView.RESULTS:
        grid = build_gif_grid(state.data)
        if grid is not None:
            _render_grid(grid)
