"""
Pytest configuration & shared fixtures.
"""

import logging
from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from textmapper.main import create_app
from textmapper.schemas import Attribute, AttributeType, Event, StreamDefinition
from textmapper.sinks import InMemorySink


@pytest.fixture
def stock_attributes() -> list[Attribute]:
    return [
        Attribute(name="symbol", type=AttributeType.STRING),
        Attribute(name="price", type=AttributeType.FLOAT),
        Attribute(name="volume", type=AttributeType.LONG),
    ]


@pytest.fixture
def stock_stream(stock_attributes: list[Attribute]) -> StreamDefinition:
    return StreamDefinition(id="FooStream", attributes=stock_attributes)


@pytest.fixture
def wso2_event() -> Event:
    return Event(timestamp=1_700_000_000_000, data=("WSO2", 55.6, 100))


@pytest.fixture
def ibm_event() -> Event:
    return Event(timestamp=1_700_000_000_001, data=("IBM", 75.6, 10))


@pytest.fixture
def sink() -> InMemorySink:
    return InMemorySink()


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo setup_logging() changes made inside a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest_asyncio.fixture
async def app() -> AsyncIterator[FastAPI]:
    """Provide a fresh FastAPI app."""
    yield create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Provide an async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac
