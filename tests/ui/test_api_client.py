from unittest.mock import MagicMock

import pytest
import requests

from synthdata_ui import api_client
from synthdata_ui.api_client import ApiError, SynthDataClient


def _response(status_code=200, payload=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    response.text = ""
    response.reason = "Error"
    return response


@pytest.fixture
def request_mock(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(api_client.requests, "request", mock)
    return mock


def test_sign_in_stores_token_and_authenticates_later_calls(request_mock):
    request_mock.side_effect = [_response(payload={"access_token": "tok"}), _response(payload=[])]
    client = SynthDataClient(base_url="http://api/")

    client.sign_in("analyst@synthdata.co.ke", "pw")
    client.list_projects()

    method, url = request_mock.call_args_list[0].args
    assert (method, url) == ("POST", "http://api/auth/token")
    assert request_mock.call_args_list[0].kwargs["data"] == {"username": "analyst@synthdata.co.ke", "password": "pw"}
    assert request_mock.call_args_list[1].args == ("GET", "http://api/projects/")
    assert request_mock.call_args_list[1].kwargs["headers"] == {"Authorization": "Bearer tok"}


def test_sign_out_drops_the_token(request_mock):
    request_mock.return_value = _response(payload=[])
    client = SynthDataClient(base_url="http://api", token="tok")

    client.sign_out()
    client.list_templates()

    assert "Authorization" not in request_mock.call_args.kwargs["headers"]


def test_error_detail_becomes_the_message(request_mock):
    request_mock.return_value = _response(400, {"detail": "Please upload a CSV file"})

    with pytest.raises(ApiError) as excinfo:
        SynthDataClient(base_url="http://api", token="tok").get_dataset("d-1")

    assert excinfo.value.message == "Please upload a CSV file"
    assert excinfo.value.status_code == 400


def test_validation_errors_are_joined(request_mock):
    request_mock.return_value = _response(422, {"detail": [{"msg": "too small"}, {"msg": "too big"}]})

    with pytest.raises(ApiError, match="too small; too big"):
        SynthDataClient(base_url="http://api").create_generation("d-1", "ctgan", 10, 1.0, 5)


def test_connection_failure_is_an_api_error(request_mock):
    request_mock.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError, match="Could not reach the API"):
        SynthDataClient(base_url="http://api").get_stats()
