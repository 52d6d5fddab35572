import httpx
import pytest

from adapters.squares_uploader import upload_ipuz
from core.domain.errors import UploadError


def test_posts_multipart_form_and_builds_view_url(settings, mock_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"pids": ["abc123", "zzz"]})

    result = upload_ipuz('{"title": "t"}', client=mock_client(handler), settings=settings)

    assert result.pid == "abc123"
    assert result.view_url == "https://squares.io/solve/abc123"

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://squares.io/api/1/puzzle"
    assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    body = request.content
    assert b'name="data"\r\n\r\n{"options":{}}\r\n' in body
    assert b'name="puz"\r\n\r\n{"title": "t"}\r\n' in body
    assert b'name="v"\r\n\r\n2\r\n' in body
    assert b"filename=" not in body


def test_failure_status_raises(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(502))

    with pytest.raises(UploadError, match="Failed to upload puzzle: Bad Gateway"):
        upload_ipuz("{}", client=client, settings=settings)


def test_empty_pids_is_an_error_not_undefined(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(200, json={"pids": []}))

    with pytest.raises(UploadError, match="did not contain a puzzle id"):
        upload_ipuz("{}", client=client, settings=settings)


def test_non_json_response_raises(settings, mock_client):
    client = mock_client(lambda request: httpx.Response(200, text="ok"))

    with pytest.raises(UploadError):
        upload_ipuz("{}", client=client, settings=settings)
