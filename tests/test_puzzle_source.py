import httpx
import pytest

from adapters.puzzle_source import build_puzzle_url, fetch_puzzle
from conftest import make_puzzle_payload
from core.domain.errors import MalformedPuzzleError, UpstreamHTTPError


def test_url_interpolates_date(settings):
    assert (
        build_puzzle_url("2024-01-01", settings)
        == "https://www.nytimes.com/svc/crosswords/v6/puzzle/daily/2024-01-01.json"
    )


def test_fetch_sends_bypass_header_and_parses(settings, mock_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=make_puzzle_payload())

    response = fetch_puzzle("2024-01-01", client=mock_client(handler), settings=settings)

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/svc/crosswords/v6/puzzle/daily/2024-01-01.json"
    assert seen[0].headers["X-Games-Auth-Bypass"] == "true"
    assert response.editor == "Will Shortz"
    assert response.related_content.url == "https://example.com/wordplay"
    assert len(response.body[0].cells) == 4


@pytest.mark.parametrize("status", [403, 404, 500])
def test_non_200_is_reported_with_status(settings, mock_client, status):
    client = mock_client(lambda request: httpx.Response(status))

    with pytest.raises(UpstreamHTTPError) as exc_info:
        fetch_puzzle("2024-01-01", client=client, settings=settings)

    assert exc_info.value.status_code == status
    assert str(status) in str(exc_info.value)


def test_other_2xx_is_still_an_error(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(204))

    with pytest.raises(UpstreamHTTPError):
        fetch_puzzle("2024-01-01", client=client, settings=settings)


@pytest.mark.parametrize("count", [0, 2])
def test_body_count_must_be_one(settings, mock_client, count):
    body = make_puzzle_payload()["body"][0]
    payload = make_puzzle_payload(body=[body] * count)
    client = mock_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(MalformedPuzzleError, match="Expected exactly one body element"):
        fetch_puzzle("2024-01-01", client=client, settings=settings)


def test_missing_body_is_malformed(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(200, json={"copyright": "x"}))

    with pytest.raises(MalformedPuzzleError, match="Unexpected puzzle response"):
        fetch_puzzle("2024-01-01", client=client, settings=settings)


@pytest.mark.parametrize("dimensions", [{"width": 0, "height": 2}, {"width": 2, "height": 0}])
def test_empty_grid_is_malformed(settings, mock_client, dimensions):
    payload = make_puzzle_payload()
    payload["body"][0]["dimensions"] = dimensions
    client = mock_client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(MalformedPuzzleError, match="Unexpected puzzle response"):
        fetch_puzzle("2024-01-01", client=client, settings=settings)


def test_non_json_body_is_malformed(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(200, text="<html>nope</html>"))

    with pytest.raises(MalformedPuzzleError):
        fetch_puzzle("2024-01-01", client=client, settings=settings)
