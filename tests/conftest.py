from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

PUZZLE_HOST = "www.nytimes.com"
UPLOAD_HOST = "squares.io"


def make_puzzle_payload(**overrides: Any) -> dict[str, Any]:
    """2x2 puzzle, solution `A #` / `B C` with C circled; one across and one down clue."""

    payload: dict[str, Any] = {
        "body": [
            {
                "dimensions": {"width": 2, "height": 2},
                "cells": [
                    {"answer": "A", "label": "1", "type": 1},
                    {},
                    {"answer": "B", "type": 1},
                    {"answer": "C", "type": 2},
                ],
                "clues": [
                    {"label": "1", "direction": "Across", "text": [{"plain": "First letter"}]},
                    {"label": "1", "direction": "Down", "text": [{"plain": "Grade"}]},
                ],
            }
        ],
        "copyright": "2024",
        "relatedContent": {"url": "https://example.com/wordplay"},
        "editor": "Will Shortz",
        "constructors": ["Ada", "Grace"],
        "publicationDate": "2024-01-01",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(output_dir=tmp_path / "puzzles", _env_file=None)


@pytest.fixture
def mock_client() -> Callable[..., httpx.Client]:
    """Builds an `httpx.Client` whose requests are answered by `handler`."""

    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


def routing_handler(
    *,
    puzzle: httpx.Response | None = None,
    upload: httpx.Response | None = None,
    seen: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Answers GETs to the puzzle host and POSTs to the upload host."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if request.url.host == PUZZLE_HOST and puzzle is not None:
            return puzzle
        if request.url.host == UPLOAD_HOST and upload is not None:
            return upload
        return httpx.Response(500, text=json.dumps({"unexpected": str(request.url)}))

    return handler
