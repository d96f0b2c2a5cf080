import pytest
import requests
from pydantic import ValidationError

from conftest import BASE_URL, FakeResp
from strava_client.context import RequestContext
from strava_client.errors import (
    StravaAPIError,
    StravaCancelledError,
    StravaConfigError,
    StravaDecodeError,
    StravaResourceNotFoundError,
    StravaTransportError,
)
from strava_client.models import Lap, MetaActivity
from strava_client.serialization import ListOf
from strava_client.transport import Transport, TransportConfig, mask_token


def test_get_builds_url_and_auth_header(transport, fake_session):
    fake_session.queue(FakeResp(200, {"id": 1}))
    result = transport.get(None, "/activities/1", {"a": "b"}, MetaActivity)

    call = fake_session.last
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}/activities/1"
    assert call["params"] == {"a": "b"}
    assert call["headers"]["Authorization"] == "Bearer tok-1234"
    assert call["timeout"] == 15
    assert result == MetaActivity(id=1)


def test_empty_params_are_not_sent(transport, fake_session):
    fake_session.queue(FakeResp(200, {}))
    transport.get(None, "/athlete", {})
    assert fake_session.last["params"] is None


def test_post_form_sends_form_body(transport, fake_session):
    fake_session.queue(FakeResp(201, {"id": 9}))
    transport.post_form(None, "/activities", {"name": "Run"}, MetaActivity)

    call = fake_session.last
    assert call["method"] == "POST"
    assert call["data"] == {"name": "Run"}
    assert call["json"] is None


def test_put_json_sets_content_type(transport, fake_session):
    fake_session.queue(FakeResp(200, {"id": 9}))
    transport.put_json(None, "/activities/9", {"commute": True}, MetaActivity)

    call = fake_session.last
    assert call["method"] == "PUT"
    assert call["json"] == {"commute": True}
    assert call["data"] is None
    assert call["headers"]["Content-Type"] == "application/json"


def test_context_token_overrides_config_token(transport, fake_session):
    fake_session.queue(FakeResp(200, {}))
    transport.get(RequestContext(access_token="per-call"), "/athlete")
    assert fake_session.last["headers"]["Authorization"] == "Bearer per-call"


def test_missing_token_fails_before_network(fake_session):
    transport = Transport(TransportConfig(access_token=""), session=fake_session)
    with pytest.raises(StravaConfigError):
        transport.get(None, "/athlete")
    assert fake_session.calls == []


def test_non_2xx_raises_api_error_with_status_and_body(transport, fake_session):
    body = '{"message": "Bad Request", "errors": [{"resource": "Activity", "field": "name", "code": "missing"}]}'
    fake_session.queue(FakeResp(400, text=body))

    with pytest.raises(StravaAPIError) as excinfo:
        transport.get(None, "/activities/1", None, MetaActivity)

    err = excinfo.value
    assert not isinstance(err, StravaDecodeError)
    assert err.status_code == 400
    assert err.body == body
    assert err.detail == "Bad Request | Activity/name:missing"


def test_non_json_error_body_still_raises_api_error(transport, fake_session):
    fake_session.queue(FakeResp(502, text="<html>Bad Gateway</html>"))
    with pytest.raises(StravaAPIError) as excinfo:
        transport.get(None, "/activities/1", None, MetaActivity)
    assert excinfo.value.status_code == 502
    assert excinfo.value.body == "<html>Bad Gateway</html>"


def test_404_maps_to_not_found_subclass(transport, fake_session):
    fake_session.queue(FakeResp(404, {"message": "Record Not Found"}))
    with pytest.raises(StravaResourceNotFoundError) as excinfo:
        transport.get(None, "/clubs/1")
    assert excinfo.value.status_code == 404


def test_malformed_json_on_success_raises_decode_error(transport, fake_session):
    fake_session.queue(FakeResp(200, text="{not json"))
    with pytest.raises(StravaDecodeError):
        transport.get(None, "/activities/1", None, MetaActivity)


def test_wrong_shape_raises_decode_error(transport, fake_session):
    fake_session.queue(FakeResp(200, [{"id": 1}]))
    with pytest.raises(StravaDecodeError):
        transport.get(None, "/activities/1", None, MetaActivity)


def test_list_target_rejects_object(transport, fake_session):
    fake_session.queue(FakeResp(200, {"id": 1}))
    with pytest.raises(StravaDecodeError):
        transport.get(None, "/activities/1/laps", None, ListOf(MetaActivity))


def test_network_error_raises_transport_error(transport, fake_session):
    fake_session.queue(requests.ConnectionError("boom"))
    with pytest.raises(StravaTransportError) as excinfo:
        transport.get(None, "/athlete")
    assert not isinstance(excinfo.value, StravaCancelledError)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_cancelled_context_never_dispatches(transport, fake_session):
    ctx = RequestContext()
    ctx.cancel()
    with pytest.raises(StravaCancelledError):
        transport.get(ctx, "/athlete")
    assert fake_session.calls == []


def test_cancel_during_request_discards_response(transport, fake_session):
    ctx = RequestContext()

    class CancellingSession:
        def request(self, method, url, **kwargs):
            ctx.cancel()
            return FakeResp(200, {"id": 1})

    transport = Transport(transport.config, session=CancellingSession())
    with pytest.raises(StravaCancelledError):
        transport.get(ctx, "/activities/1", None, MetaActivity)


def test_connection_error_after_cancel_is_cancellation(transport, fake_session):
    ctx = RequestContext()

    class AbortingSession:
        def request(self, method, url, **kwargs):
            ctx.cancel()
            raise requests.ConnectionError("connection aborted")

    transport = Transport(transport.config, session=AbortingSession())
    with pytest.raises(StravaCancelledError, match="cancelled") as excinfo:
        transport.get(ctx, "/activities/1", None, MetaActivity)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_decode_error_chains_validation_error(transport, fake_session):
    fake_session.queue(FakeResp(200, [{"id": 1}, {"id": "not-a-number"}]))
    with pytest.raises(StravaDecodeError, match="1.id") as excinfo:
        transport.get(None, "/activities/1/laps", None, ListOf(Lap))
    assert isinstance(excinfo.value.__cause__.__cause__, ValidationError)


def test_deadline_bounds_request_timeout(transport, fake_session):
    fake_session.queue(FakeResp(200, {}))
    transport.get(RequestContext(timeout=2), "/athlete")
    assert 0 < fake_session.last["timeout"] <= 2


def test_timeout_after_deadline_is_cancellation(transport, fake_session, monkeypatch):
    ctx = RequestContext(timeout=5)
    fake_session.queue(requests.Timeout("read timed out"))
    monkeypatch.setattr(ctx, "remaining", lambda: -0.1)
    monkeypatch.setattr(ctx, "check", lambda operation: None)
    with pytest.raises(StravaCancelledError):
        transport.get(ctx, "/athlete")


def test_raw_payload_returned_without_target(transport, fake_session):
    fake_session.queue(FakeResp(200, {"anything": [1, 2]}))
    assert transport.get(None, "/athlete") == {"anything": [1, 2]}


def test_url_for_joins_slashes():
    transport = Transport(TransportConfig(access_token="t", base_url="https://x/api/v3/"))
    assert transport.url_for("/clubs/1") == "https://x/api/v3/clubs/1"


def test_config_repr_masks_token():
    config = TransportConfig(access_token="secret-abcd")
    assert "secret" not in repr(config)
    assert "****abcd" in repr(config)


def test_mask_token():
    assert mask_token("") == ""
    assert mask_token("abcdefgh") == "****efgh"
