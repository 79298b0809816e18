"""Tests for the requests-backed REST client."""

from decimal import Decimal
import json

import pytest
import requests
import responses

from resttools import BearerAuth, JsonCodec, RestClient, RestResponse

BASE = "https://api.example.com/v1"


@pytest.fixture
def http():
    return RestClient(BASE, auth=BearerAuth("abc123"), timeout=10)


@pytest.mark.unit
class TestRestClient:
    @responses.activate
    def test_auth_header(self, http):
        responses.add(responses.GET, f"{BASE}/users", json=[], status=200)
        http.get("/users")
        assert responses.calls[0].request.headers["Authorization"] == "Bearer abc123"

    @responses.activate
    def test_no_auth_header_without_authenticator(self):
        client = RestClient(BASE)
        responses.add(responses.GET, f"{BASE}/users", json=[], status=200)
        client.get("/users")
        assert "Authorization" not in responses.calls[0].request.headers

    @responses.activate
    def test_trailing_slash_stripped(self):
        client = RestClient(f"{BASE}/")
        responses.add(responses.GET, f"{BASE}/users", json=[], status=200)
        client.get("/users")
        assert responses.calls[0].request.url == f"{BASE}/users"

    @responses.activate
    def test_json_body_sent_with_codec(self, http):
        responses.add(responses.POST, f"{BASE}/users", json={"id": 1}, status=201)
        resp = http.post("/users", json={"name": "Ada"})

        sent = responses.calls[0].request
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.body) == {"name": "Ada"}
        assert resp.is_successful
        assert resp.status_code == 201
        assert resp.data == {"id": 1}

    @responses.activate
    def test_custom_codec(self):
        codec = JsonCodec(
            dumps=lambda obj: json.dumps(obj, default=str),
            loads=lambda text: json.loads(text, parse_float=Decimal),
        )
        client = RestClient(BASE, codec=codec)
        responses.add(responses.PUT, f"{BASE}/prices/1", body='{"amount": 1.10}', status=200)
        resp = client.put("/prices/1", json={"amount": Decimal("1.10")})

        assert json.loads(responses.calls[0].request.body) == {"amount": "1.10"}
        assert resp.data == {"amount": Decimal("1.10")}

    @responses.activate
    def test_path_without_leading_slash(self, http):
        responses.add(responses.GET, f"{BASE}/users", json=[], status=200)
        http.get("users")
        assert responses.calls[0].request.url == f"{BASE}/users"

    @responses.activate
    def test_query_params(self, http):
        responses.add(responses.GET, f"{BASE}/users", json=[], status=200)
        http.get("/users", params={"page": 2})
        assert responses.calls[0].request.url == f"{BASE}/users?page=2"

    @responses.activate
    def test_empty_body(self, http):
        responses.add(responses.DELETE, f"{BASE}/users/1", status=204)
        resp = http.delete("/users/1")
        assert resp.is_successful
        assert resp.content is None
        assert resp.data is None

    def test_context_manager_closes_session(self):
        with RestClient(BASE) as client:
            assert isinstance(client, RestClient)


@pytest.mark.unit
class TestFailuresCaptured:
    @responses.activate
    def test_http_error_not_raised(self, http):
        responses.add(responses.GET, f"{BASE}/users/9", body="<html>500</html>", status=500)
        resp = http.get("/users/9")
        assert not resp.is_successful
        assert resp.status_code == 500
        assert resp.content == "<html>500</html>"
        assert resp.data is None
        assert resp.error is None

    @responses.activate
    def test_transport_error_captured(self, http):
        responses.add(responses.GET, f"{BASE}/users", body=requests.ConnectionError("refused"))
        resp = http.get("/users")
        assert resp.status_code == 0
        assert isinstance(resp.error, requests.ConnectionError)
        assert not resp.is_successful

    @responses.activate
    def test_decode_error_captured(self, http):
        responses.add(responses.GET, f"{BASE}/users", body="not json", status=200)
        resp = http.get("/users")
        assert resp.status_code == 200
        assert isinstance(resp.error, ValueError)
        assert resp.content == "not json"
        assert not resp.is_successful

    @responses.activate
    def test_redirect_kept_when_not_following(self):
        client = RestClient(BASE, follow_redirects=False)
        responses.add(
            responses.GET,
            f"{BASE}/users",
            status=302,
            headers={"Location": "https://login.example.com/"},
        )
        resp = client.get("/users")
        assert resp.status_code == 302
        assert resp.headers["Location"] == "https://login.example.com/"
        assert resp.headers.get("location") == "https://login.example.com/"

    @responses.activate
    def test_redirect_body_not_decoded(self):
        client = RestClient(BASE, follow_redirects=False)
        responses.add(
            responses.GET,
            f"{BASE}/users",
            body="<html>Moved</html>",
            status=301,
            headers={"Location": f"{BASE}/people"},
        )
        resp = client.get("/users")
        assert resp.status_code == 301
        assert resp.error is None
        assert resp.data is None
        assert resp.content == "<html>Moved</html>"
        assert not resp.is_successful


@pytest.mark.unit
class TestBearerAuth:
    def test_sets_header(self):
        req = requests.Request("GET", BASE).prepare()
        BearerAuth("tok")(req)
        assert req.headers["Authorization"] == "Bearer tok"

    def test_token_hidden_in_repr(self):
        assert "tok" not in repr(BearerAuth("tok"))

    def test_equality(self):
        assert BearerAuth("a") == BearerAuth("a")
        assert BearerAuth("a") != BearerAuth("b")

    def test_hashable(self):
        assert len({BearerAuth("a"), BearerAuth("a"), BearerAuth("b")}) == 2


@pytest.mark.unit
def test_response_success_range():
    assert RestResponse(status_code=200).is_successful
    assert RestResponse(status_code=299).is_successful
    assert not RestResponse(status_code=302).is_successful
    assert not RestResponse(status_code=200, error=ValueError("x")).is_successful
