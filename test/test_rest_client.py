import pytest

from sfm.domain.errors import ApiError, ResponseParseError, TransportError


def test_url_encodes_each_segment_and_appends_query(api):
    assert api.url("producto", "vendidos", "añoActual") == "http://api.test/producto/vendidos/a%C3%B1oActual"
    assert api.url("cliente", params={"type": "2"}) == "http://api.test/cliente?type=2"
    assert api.url("venta", "cliente", "7/../x") == "http://api.test/venta/cliente/7%2F..%2Fx"


def test_get_json_returns_parsed_body_and_applies_timeout(api, session):
    session.on("GET", "/producto?disponible=true", body=[{"productoID": 1}])

    data = api.get_json("producto", params={"disponible": "true"})

    assert data == [{"productoID": 1}]
    method, url, kwargs = session.last()
    assert method == "GET"
    assert kwargs["timeout"] == 5
    assert "json" not in kwargs


def test_non_success_status_raises_api_error_with_status_and_body(api, session):
    session.on("GET", "/cliente", status=500, text="boom")

    with pytest.raises(ApiError) as exc:
        api.get_json("cliente")

    assert exc.value.status == 500
    assert exc.value.body == "boom"
    assert str(exc.value) == "500: boom"


def test_transport_failure_is_wrapped(api, session, network_down):
    session.on("GET", "/cliente", exc=network_down)

    with pytest.raises(TransportError):
        api.get_json("cliente")


def test_invalid_json_body_raises_parse_error(api, session):
    session.on("GET", "/cliente", text="<html>")

    with pytest.raises(ResponseParseError):
        api.get_json("cliente")


def test_send_json_posts_payload(api, session):
    session.on("POST", "/venta", status=201, body={"ok": True})

    api.send_json("POST", "venta", payload={"clienteId": "7", "productos": []})

    _, _, kwargs = session.last()
    assert kwargs["json"] == {"clienteId": "7", "productos": []}


def test_any_2xx_is_success(api, session):
    session.on("DELETE", "/producto/3", status=204, text="")

    r = api.request("DELETE", "producto", 3)

    assert r.status_code == 204


def test_get_list_returns_array_of_objects(api, session):
    session.on("GET", "/cliente", body=[{"id": 1}])

    assert api.get_list("cliente") == [{"id": 1}]


@pytest.mark.parametrize("body", [{"data": []}, 5, ["Ana"], [{"id": 1}, None]])
def test_get_list_rejects_other_shapes(api, session, body):
    session.on("GET", "/cliente", body=body)

    with pytest.raises(ResponseParseError):
        api.get_list("cliente")


def test_get_list_rejects_null_body(api, session):
    session.on("GET", "/cliente", text="null")

    with pytest.raises(ResponseParseError):
        api.get_list("cliente")
