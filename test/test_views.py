from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")
from tkinter import ttk  # noqa: E402

from sfm.services.clients_screen import ClientsScreen  # noqa: E402
from sfm.services.products_screen import ProductsScreen  # noqa: E402
from sfm.ui.views.clients_view import ClientsView  # noqa: E402
from sfm.ui.views.products_view import ProductsView  # noqa: E402


@pytest.fixture
def root():
    try:
        r = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    r.withdraw()
    yield r
    r.destroy()


def _app(api):
    return SimpleNamespace(
        clients=ClientsScreen(api),
        products=ProductsScreen(api),
        toast=lambda *a, **k: None,
    )


def test_reads_do_not_wipe_unsaved_product_form(root, api, session):
    session.on("GET", "/producto/sold/estaSemana", body=[])
    session.on("GET", "/producto?disponible=true", body=[])
    view = ProductsView(ttk.Notebook(root), _app(api))
    view.name_e.insert(0, "Lat")
    view.price_e.insert(0, "25")

    view.on_recent_sold()
    view.reload()

    assert view.name_e.get() == "Lat"
    assert view.price_e.get() == "25"


def test_filter_change_does_not_wipe_unsaved_client_form(root, api, session):
    session.on("GET", "/cliente?type=2", body=[])
    view = ClientsView(ttk.Notebook(root), _app(api))
    view.nombre_e.insert(0, "Eva")
    view.filter_var.set("Premium")

    view.on_filter_change()

    assert view.nombre_e.get() == "Eva"


def test_submitting_inactive_client_from_form_keeps_type(root, api, session):
    session.on("PUT", "/cliente/5", body={})
    session.on("GET", "/cliente", body=[])
    app = _app(api)
    view = ClientsView(ttk.Notebook(root), app)
    app.clients.edit({"id": 5, "nombre": "Old", "ciudad": "Tandil", "tipo": 3})
    view._render_form()

    view.on_submit()

    assert view.type_var.get() == "Normal"  # form reset after a successful save
    assert session.calls[0][2]["json"]["tipo"] == 3
