from pagefetch.domain.http_response import HttpResponse
from pagefetch.services.http_service import HttpService
from pagefetch.exceptions import HttpFetchError, HttpStatusError
from unittest.mock import Mock
import pytest
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'
    assert response == HttpResponse(200, 'hello world')


def test_fetch_sends_user_agent_and_default_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    http.fetch('https://example.com/page')
    mock_http_client.assert_called_once_with(
        'https://example.com/page', headers={'User-Agent': 'TestAgent'}, timeout=None
    )


def test_fetch_timeout_argument_overrides_service_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=30)
    http.fetch('http://example.com')
    assert mock_http_client.call_args.kwargs['timeout'] == 30
    http.fetch('http://example.com', timeout=2.5)
    assert mock_http_client.call_args.kwargs['timeout'] == 2.5


def test_fetch_decodes_raw_bytes_as_utf8():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.content = 'café'.encode('utf-8')
    mock_http_client.return_value.text = 'cafÃ©'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    assert http.fetch('http://example.com').text == 'café'


@pytest.mark.parametrize("status", [199, 301, 404, 500])
def test_fetch_non_2xx_raises_status_error(status):
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = status
    mock_http_client.return_value.reason = 'Nope'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    with pytest.raises(HttpStatusError) as exc:
        http.fetch('http://example.com/missing')
    assert str(exc.value) == f'HTTP {status}: Nope'
    assert exc.value.status_code == status
    assert exc.value.url == 'http://example.com/missing'


def test_fetch_accepts_2xx_range():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 204
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    assert http.fetch('http://example.com').status_code == 204


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.ConnectionError("connection refused")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(HttpFetchError) as exc:
        http.fetch('http://example.com')
    assert "http://example.com" in str(exc.value)
    assert "connection refused" in str(exc.value)


def test_fetch_unsupported_scheme_is_transport_error():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.InvalidSchema("No connection adapters")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    with pytest.raises(HttpFetchError):
        http.fetch('ftp://example.com/file')


def test_fetch_bubbles_unexpected_exceptions():
    """Verify that non-requests exceptions from the client are NOT wrapped."""
    mock_http_client = Mock()
    mock_http_client.side_effect = RuntimeError("Real bug")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(RuntimeError) as exc:
        http.fetch('http://example.com')
    assert "Real bug" in str(exc.value)
