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
Fetch-state hook: tracks data / loading / error for a single locator.

A widget calls `FetchStateHook.observe(locator)` every time it renders. When the
locator differs from the one seen last, exactly one GET is issued and the state
moves to loading; when that request completes its outcome replaces the state,
unless the locator has changed again (or the hook was closed) in the meantime.

Staleness is tracked with a generation counter: each locator change bumps it and
every request remembers the generation it was issued for.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import aiohttp

from search_widgets.errors import FetchError, HttpError, NetworkFailure, ParseFailure
from search_widgets.utils import format_warning, redact_url

logger = logging.getLogger(__name__)


class NoRequest(Enum):
    """Locator sentinel meaning "do not fetch anything"."""
    NO_REQUEST = "no-request"

    def __repr__(self):
        return "NO_REQUEST"


NO_REQUEST = NoRequest.NO_REQUEST

Locator = str | NoRequest


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    data: Any = None
    loading: bool = False
    error: str | None = None

    @property
    def status(self) -> FetchStatus:
        if self.loading:
            return FetchStatus.LOADING
        if self.error is not None:
            return FetchStatus.ERROR
        if self.data is not None:
            return FetchStatus.SUCCESS
        return FetchStatus.IDLE


IDLE = FetchState()
LOADING = FetchState(loading=True)

SessionFactory = Callable[[], aiohttp.ClientSession]
Listener = Callable[[FetchState], None]

_UNSEEN = object()


async def fetch_json(url: str, session_factory: SessionFactory = aiohttp.ClientSession, timeout: float | None = None) -> Any:
    """
    GET `url` and parse the body as JSON.

    Raises:
        NetworkFailure: the request could not complete or timed out.
        HttpError: the response status is not 2xx.
        ParseFailure: the body is not valid JSON.
    """
    try:
        async with asyncio.timeout(timeout):
            async with session_factory() as session:
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        raise HttpError(response.status, response.reason)
                    body = await response.read()
    except aiohttp.ClientError as e:
        raise NetworkFailure(f"Request failed: {str(e) or e.__class__.__name__}") from e
    except TimeoutError as e:
        raise NetworkFailure("Request timed out") from e

    try:
        return json.loads(body)
    except ValueError as e:
        raise ParseFailure(f"Could not parse response as JSON: {e}") from e


class FetchStateHook:
    """
    Per-widget fetch state. Not shared between widgets, not thread-safe: all
    calls are expected from the event loop that runs the requests.
    """

    def __init__(self, session_factory: SessionFactory = aiohttp.ClientSession, timeout: float | None = None):
        self._session_factory = session_factory
        self._timeout = timeout
        self._state = IDLE
        self._locator: Any = _UNSEEN
        self._generation = 0
        self._closed = False
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def locator(self) -> Locator | None:
        return None if self._locator is _UNSEEN else self._locator

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with every new state. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def observe(self, locator: Locator) -> FetchState:
        """
        Report the current locator and return the current state.

        A locator equal to the previous one is a no-op. Any other value starts a
        new generation: the sentinel settles to idle, a URL schedules one GET on
        the running event loop.
        """
        if self._closed:
            raise RuntimeError("observe() called on a closed FetchStateHook")
        if locator is not NO_REQUEST and not isinstance(locator, str):
            raise TypeError(f"locator must be a URL string or NO_REQUEST, got {type(locator).__name__}")
        if self._locator is not _UNSEEN and locator == self._locator:
            return self._state

        self._locator = locator
        self._generation += 1

        if locator is NO_REQUEST:
            self._set_state(IDLE)
            return self._state

        self._set_state(LOADING)
        task = asyncio.get_running_loop().create_task(self._run(locator, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return self._state

    async def settle(self) -> FetchState:
        """Wait until no request is in flight, then return the state."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
        return self._state

    def close(self):
        """
        Tear the hook down. Requests still in flight are left to finish but their
        results are dropped, and listeners are no longer called.
        """
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        if self._tasks:
            logger.debug(f"Closing fetch hook with {len(self._tasks)} request(s) in flight")

    async def _run(self, url: str, generation: int):
        logger.info(f"GET {redact_url(url)}")
        try:
            data = await fetch_json(url, self._session_factory, self._timeout)
        except FetchError as e:
            logger.warning(format_warning(f"GET {redact_url(url)} failed: {e}"))
            outcome = FetchState(error=str(e))
        except asyncio.CancelledError:
            # forget the locator so the next observe() of it fetches again
            if generation == self._generation:
                self._locator = _UNSEEN
            raise
        else:
            outcome = FetchState(data=data)

        if self._closed:
            logger.debug(f"Discarding result for {redact_url(url)}: hook closed")
            return
        if generation != self._generation:
            logger.debug(f"Discarding stale result for {redact_url(url)} (generation {generation} < {self._generation})")
            return
        self._set_state(outcome)

    def _set_state(self, state: FetchState):
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                # listener failures stay inside the hook
                logger.exception(f"Fetch state listener {listener!r} failed on {state.status.value}")
