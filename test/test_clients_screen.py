import pytest

from sfm.domain.models import ClientDraft, client_type_label, client_type_value
from sfm.services.clients_screen import ClientsScreen

CLIENTS = [
    {"id": 1, "nombre": "Ana", "ciudad": "Rosario", "tipo": 1},
    {"id": 42, "nombre": "Luis", "ciudad": "Córdoba", "tipo": 2},
]


def test_load_success_replaces_list_and_clears_error(api, session):
    session.on("GET", "/cliente", body=CLIENTS)
    screen = ClientsScreen(api)
    screen.error = "stale"
    screen.clients = [{"id": 99}]

    assert screen.load() is True
    assert screen.clients == CLIENTS
    assert screen.error == ""


def test_load_failure_empties_list_and_sets_message(api, session):
    session.on("GET", "/cliente", body=CLIENTS)
    session.on("GET", "/cliente", status=503, text="down")
    screen = ClientsScreen(api)
    screen.load()
    assert screen.clients == CLIENTS

    assert screen.load() is False
    assert screen.clients == []
    assert screen.error == "Could not load clients."


def test_filter_change_reloads_with_type_query(api, session):
    session.on("GET", "/cliente?type=2", body=[CLIENTS[1]])
    screen = ClientsScreen(api)

    screen.set_filter("2")

    assert screen.filter == "2"
    assert session.count("GET", "/cliente?type=2") == 1
    assert screen.clients == [CLIENTS[1]]


def test_unknown_filter_falls_back_to_all(api, session):
    session.on("GET", "/cliente", body=CLIENTS)
    screen = ClientsScreen(api)

    screen.set_filter("9")

    assert screen.filter == "all"
    assert session.count("GET", "/cliente") == 1


def test_reloading_same_filter_twice_yields_same_list(api, session):
    session.on("GET", "/cliente?type=1", body=[CLIENTS[0]])
    screen = ClientsScreen(api)
    screen.set_filter("1")
    first = list(screen.clients)

    screen.load()

    assert screen.clients == first


def test_submit_without_id_posts_to_collection_then_reloads(api, session):
    session.on("POST", "/cliente", status=201, body={"id": 3})
    session.on("GET", "/cliente", body=CLIENTS)
    screen = ClientsScreen(api)
    screen.update_draft(nombre="Eva", ciudad="Salta", tipo="1")

    assert screen.submit() is True

    assert session.calls[0][0:2] == ("POST", "http://api.test/cliente")
    assert session.calls[0][2]["json"] == {"nombre": "Eva", "ciudad": "Salta", "tipo": 1}
    assert session.count("GET", "/cliente") == 1
    assert screen.draft == ClientDraft()


def test_update_client_to_premium_puts_to_item_endpoint(api, session):
    session.on("PUT", "/cliente/42", body={})
    session.on("GET", "/cliente", body=CLIENTS)
    screen = ClientsScreen(api)
    screen.edit(CLIENTS[1])
    screen.update_draft(tipo="2")

    screen.submit()

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("PUT", "http://api.test/cliente/42")
    assert kwargs["json"] == {"nombre": "Luis", "ciudad": "Córdoba", "tipo": 2}
    assert session.count("GET", "/cliente") == 1


def test_failed_save_keeps_draft_and_skips_reload(api, session):
    session.on("POST", "/cliente", status=400, text="bad")
    screen = ClientsScreen(api)
    screen.update_draft(nombre="Eva", ciudad="Salta")
    draft = screen.draft

    assert screen.submit() is False

    assert screen.draft == draft
    assert screen.error == "Error saving the client."
    assert session.count("GET", "/cliente") == 0


def test_blank_required_field_sends_nothing(api, session):
    screen = ClientsScreen(api)
    screen.update_draft(nombre="  ", ciudad="Salta")

    assert screen.submit() is False

    assert session.calls == []
    assert screen.error == "Name is required."


def test_successful_delete_reloads_exactly_once(api, session):
    session.on("DELETE", "/cliente/42", status=204, text="")
    session.on("GET", "/cliente", body=[CLIENTS[0]])
    screen = ClientsScreen(api)

    assert screen.delete(42) is True

    assert session.count("GET", "/cliente") == 1
    assert screen.clients == [CLIENTS[0]]


def test_failed_delete_performs_no_reload_and_keeps_list(api, session):
    session.on("DELETE", "/cliente/42", status=500, text="nope")
    screen = ClientsScreen(api)
    screen.clients = list(CLIENTS)

    assert screen.delete(42) is False

    assert session.count("GET", "/cliente") == 0
    assert screen.clients == CLIENTS
    assert screen.error == "Error deactivating the client."


@pytest.mark.parametrize("kwargs", [
    {"text": "null"},
    {"text": "5"},
    {"body": {"error": "x", "data": []}},
    {"body": ["Ana", "Luis"]},
    {"text": "<html>"},
])
def test_load_with_unexpected_body_empties_list(api, session, kwargs):
    session.on("GET", "/cliente", **kwargs)
    screen = ClientsScreen(api)
    screen.clients = list(CLIENTS)

    assert screen.load() is False

    assert screen.clients == []
    assert screen.error == "Could not load clients."


def test_load_transport_failure_empties_list(api, session, network_down):
    session.on("GET", "/cliente", exc=network_down)
    screen = ClientsScreen(api)
    screen.clients = list(CLIENTS)

    assert screen.load() is False

    assert screen.clients == []
    assert screen.error == "Could not load clients."


def test_editing_inactive_client_keeps_its_type(api, session):
    session.on("PUT", "/cliente/5", body={})
    session.on("GET", "/cliente", body=CLIENTS)
    screen = ClientsScreen(api)
    screen.edit({"id": 5, "nombre": "Old", "ciudad": "Tandil", "tipo": 3})

    label = client_type_label(screen.draft.tipo)
    screen.update_draft(ciudad="Mar del Plata", tipo=client_type_value(label, screen.draft.tipo))
    screen.submit()

    assert label == "Inactive"
    assert session.calls[0][2]["json"] == {"nombre": "Old", "ciudad": "Mar del Plata", "tipo": 3}


def test_type_labels_map_back_to_values():
    assert client_type_value("Normal", "3") == "1"
    assert client_type_value("Premium", "3") == "2"
    assert client_type_value("Inactive", "3") == "3"
