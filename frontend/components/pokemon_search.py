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

from search_widgets.constants import DEFAULT_POKEMON
from search_widgets.locators import pokemon_locator
from search_widgets.view_models import PokemonCard, WidgetView, build_pokemon_card, select_view
from utils.api_calls import get_settings, use_fetch

FETCH_KEY = "pokemon"


def _render_card(card: PokemonCard):
    with stylable_container(
        key="pokemon-card",
        css_styles="""
            {
                border-radius: 16px;
                padding: 1.5rem;
                background: linear-gradient(135deg, #fff8d6 0%, #ffe26e 100%);
                box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
            }
            """,
    ):
        st.markdown(f"## {card.title}")

        image_col, info_col = st.columns([1, 1])
        with image_col:
            if card.image_url:
                st.image(card.image_url, caption=card.title, width="stretch")
        with info_col:
            for label, value in (
                ("ID", card.identifier),
                ("Weight", card.weight),
                ("Height", card.height),
                ("Types", card.types),
                ("Abilities", card.abilities),
            ):
                st.markdown(f"**{label}:** {value}")

        if card.stats:
            st.markdown("### Stats")
            for bar in card.stats:
                name_col, bar_col, value_col = st.columns([2, 5, 1])
                with name_col:
                    st.caption(bar.name)
                with bar_col:
                    # st.progress only accepts [0, 1]; bars past the ceiling are drawn full
                    st.progress(min(bar.fill_ratio, 1.0))
                with value_col:
                    st.markdown(f"**{bar.value if bar.value is not None else '?'}**")


def render_pokemon_search():
    """
    Renders the Pokemon search widget.

    The lookup follows the text input directly: every committed change of the
    name produces a new PokeAPI URL and the fetch hook requests it. While the
    request runs a loading message is shown, a failure is reported inline, and
    a successful lookup renders the Pokemon card with one bar per base stat.
    """
    if 'pokemon_name' not in st.session_state:
        st.session_state.pokemon_name = DEFAULT_POKEMON

    st.markdown("# 🔍 Pokemon Search")
    st.caption("Look up your favourite Pokemon with PokeAPI")

    st.session_state.pokemon_name = st.text_input(
        "Pokemon:",
        value=st.session_state.pokemon_name,
        placeholder="Enter a Pokemon name or number",
        key="pokemon_name_input",
    )

    locator = pokemon_locator(st.session_state.pokemon_name, get_settings())
    state = use_fetch(FETCH_KEY, locator, loading_message="⏳ Loading...")

    view = select_view(locator, state)
    if view is WidgetView.HELP:
        st.info("Type a Pokemon name or national dex number to start.")
    elif view is WidgetView.ERROR:
        st.error(f"❌ Error: {state.error}")
    elif view is WidgetView.RESULTS:
        _render_card(build_pokemon_card(state.data))
