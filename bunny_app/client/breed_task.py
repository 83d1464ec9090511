"""
bunny_app.client.breed_task

Purpose:
    Client-side call-site model for the rabbit buttons.
    A BreedTask is one independent request/response task with three observable
    states (idle, pending, resolved).

Notes:
    - No cancellation or deduplication of in-flight calls.
    - A failed fetch puts the task back in the state it was in before the call
      and re-raises.
    - fetch_breed() is the endpoint-form loader (GET /api/rabbit over httpx);
      the server-action form is bunny_app.api.actions.get_random_rabbit_breed.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

import httpx

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.ui_labels import UiLabels

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_labels = UiLabels()


class TaskState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"


@dataclass
class BreedTask:
    state: TaskState = TaskState.IDLE
    result: Optional[str] = None

    @property
    def disabled(self) -> bool:
        return self.state is TaskState.PENDING

    @property
    def label(self) -> str:
        return _labels.loading if self.disabled else _labels.breed_button

    async def run(self, fetch: Callable[[], Awaitable[str]]) -> str:
        previous = self.state
        self.state = TaskState.PENDING
        try:
            breed = await fetch()
        except Exception:
            self.state = previous
            raise

        self.result = breed
        self.state = TaskState.RESOLVED
        return breed


async def fetch_breed(client: httpx.AsyncClient) -> str:
    """
    GET /api/rabbit and return the "breed" field.

    Raises httpx.HTTPStatusError on a non-2xx response.
    """
    response = await client.get(_paths.rabbit)
    response.raise_for_status()
    breed = response.json()["breed"]
    logger.debug("fetched breed=%s", breed)
    return breed
