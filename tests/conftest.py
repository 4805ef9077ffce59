from __future__ import annotations

import asyncio
from typing import List, Union

import pytest

from lesson_engine.events import EventCollector
from lesson_engine.logger import logger
from lesson_engine.provider import GenerationRequest, GenerationResponse

ANIMAL_TEXT = (
    "lions are big cats that live on the warm grassy plains of africa\n"
    "a lion family is called a pride and they rest together in the shade\n"
    "\n"
    "baby lions are called cubs and they love to play with each other\n"
)


class FakeProvider:
    """Content provider returning canned replies (or raising) in order."""

    def __init__(self, *replies: Union[str, Exception]):
        self.replies: List[Union[str, Exception]] = list(replies)
        self.requests: List[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        self.requests.append(request)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return GenerationResponse(text=reply)


def run(coro):
    return asyncio.run(coro)


@pytest.fixture(autouse=True)
def quiet_logger():
    enabled = logger.enabled
    logger.enabled = False
    yield
    logger.enabled = enabled


@pytest.fixture
def events() -> EventCollector:
    return EventCollector()
