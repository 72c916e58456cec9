from requests.structures import CaseInsensitiveDict

from webhooks_dashboard.relay import relay_collection, relay_resource, relay_status
from webhooks_dashboard.upstream import UpstreamResponse


def make_response(status_code=200, body=b"", headers=None):
    return UpstreamResponse(status_code=status_code, body=body, headers=CaseInsensitiveDict(headers or {}))


def test_collection_copies_link_header():
    upstream = make_response(200, b"[]", {"Content-Type": "application/json", "Link": '<https://x>; rel="next"'})
    response = relay_collection(upstream)
    assert response.status_code == 200
    assert response.body == b"[]"
    assert response.headers["link"] == '<https://x>; rel="next"'


def test_collection_without_link_header():
    response = relay_collection(make_response(200, b"[]", {"Content-Type": "application/json"}))
    assert "link" not in response.headers


def test_only_selected_headers_are_copied():
    upstream = make_response(
        200, b"{}", {"Content-Type": "application/json", "X-Request-Id": "abc", "Set-Cookie": "a=b"}
    )
    response = relay_resource(upstream)
    assert "x-request-id" not in response.headers
    assert "set-cookie" not in response.headers


def test_default_content_type():
    response = relay_resource(make_response(201, b"{}"))
    assert response.headers["content-type"] == "application/json"


def test_status_only_has_no_body():
    response = relay_status(make_response(404, b'{"errors":"Not Found"}'))
    assert response.status_code == 404
    assert response.body == b""
