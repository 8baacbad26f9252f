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
Main Streamlit application file for the search widgets.

Run with `streamlit run app.py` from this directory. The sidebar switches
between the two widgets:
1.  **Pokemon Search**: looks a Pokemon up on PokeAPI as the name is typed.
2.  **GIF Search**: searches Giphy once a search has been submitted.

Only the selected widget is rendered; the other widget's fetch hook is released
so a request it still had in flight cannot update it.
"""
import logging
import os

import streamlit as st
from dotenv import load_dotenv

from components import render_giphy_search, render_pokemon_search
from search_widgets.locators import uses_placeholder_key
from utils.api_calls import get_settings, release_fetch

# Load environment variables from .env file, typically used for API keys and base URLs.
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Search Widgets",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'About': """
        ## Search Widgets
        Pokemon lookup (PokeAPI) and GIF search (Giphy) rendered as card grids.
        """
    },
)

# widget title -> (renderer, fetch hook key)
WIDGETS = {
    "🔍 Pokemon Search": (render_pokemon_search, "pokemon"),
    "🎬 GIF Search": (render_giphy_search, "giphy"),
}


def init_session_state():
    """
    Initializes session state shared across reruns.

    - `selected_widget`: title of the widget currently shown.
    - `widget_settings`: configuration loaded from the environment (see
      `utils.api_calls.get_settings`).
    """
    if 'selected_widget' not in st.session_state:
        st.session_state.selected_widget = next(iter(WIDGETS))
    get_settings()


def render_sidebar():
    st.title("🔍 Search Widgets")
    st.session_state.selected_widget = st.radio(
        "Widget",
        list(WIDGETS.keys()),
        index=list(WIDGETS.keys()).index(st.session_state.selected_widget),
        key="widget_radio_select",
        label_visibility="collapsed",
    )

    st.markdown("---")
    settings = get_settings()
    api_key = st.text_input(
        "Giphy API Key",
        value="" if uses_placeholder_key(settings.giphy_api_key) else settings.giphy_api_key,
        type="password",
        key="giphy_api_key_input",
        help="Overrides GIPHY_API_KEY for this session.",
    )
    if api_key.strip() and api_key.strip() != settings.giphy_api_key:
        logger.info("Giphy API key overridden from the sidebar")
        st.session_state.widget_settings = settings.model_copy(update={"giphy_api_key": api_key.strip()})


def main():
    init_session_state()

    with st.sidebar:
        render_sidebar()

    selected = st.session_state.selected_widget
    for title, (_, fetch_key) in WIDGETS.items():
        if title != selected:
            release_fetch(fetch_key)

    renderer, _ = WIDGETS[selected]
    renderer()


if __name__ == "__main__":
    main()
