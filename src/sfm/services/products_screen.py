from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from sfm.domain.errors import ResponseParseError
from sfm.domain.models import ProductDraft, draft_from_product
from sfm.services.resource_screen import ResourceScreen, parse_float, parse_int, required_text

log = logging.getLogger(__name__)

RESOURCE = "producto"


class ProductsScreen(ResourceScreen):
    def __init__(self, client):
        super().__init__(client)
        self.products: list[dict] = []
        self.recent_sold: list[dict] = []
        self.year_count: Optional[int] = None
        self.draft = ProductDraft()

    # ---------- reads ----------
    def load_available(self) -> bool:
        def fetch():
            self.products = self.client.get_list(RESOURCE, params={"disponible": "true"})

        def clear():
            self.products = []

        return self._attempt("Could not load available products.", fetch, on_failure=clear)

    def load_recent_sold(self) -> bool:
        def fetch():
            self.recent_sold = self.client.get_list(RESOURCE, "sold", "estaSemana")

        def clear():
            self.recent_sold = []

        return self._attempt("Could not load products sold this week.", fetch, on_failure=clear)

    def load_year_count(self) -> bool:
        def fetch():
            data = self.client.get_json(RESOURCE, "vendidos", "añoActual")
            if not isinstance(data, dict) or "count" not in data:
                raise ResponseParseError(f"Yearly count response missing 'count'. Raw: {data}")
            self.year_count = data["count"]

        def clear():
            self.year_count = None

        return self._attempt("Could not load the yearly sales count.", fetch, on_failure=clear)

    # ---------- draft ----------
    def edit(self, record: dict) -> None:
        self.draft = draft_from_product(record)

    def update_draft(self, **fields) -> None:
        self.draft = replace(self.draft, **fields)

    def reset_draft(self) -> None:
        self.draft = ProductDraft()

    def _payload(self) -> dict:
        return {
            "name": required_text(self.draft.name, "Name"),
            "price": parse_float(self.draft.price, "Price"),
            "stock": parse_int(self.draft.stock, "Stock"),
        }

    # ---------- writes ----------
    def submit(self) -> bool:
        def save():
            payload = self._payload()
            product_id = self.draft.id.strip()
            if product_id:
                self.client.send_json("PUT", RESOURCE, product_id, payload=payload)
            else:
                self.client.send_json("POST", RESOURCE, payload=payload)
            log.info("product_saved id=%s mode=%s", product_id or "-", "update" if product_id else "create")

        if not self._attempt("Error saving the product.", save):
            return False
        self.reset_draft()
        self.load_available()
        return True

    def delete(self, product_id) -> bool:
        def disable():
            self.client.request("DELETE", RESOURCE, product_id)

        if not self._attempt("Error disabling the product.", disable):
            return False
        log.info("product_disabled id=%s", product_id)
        self.load_available()
        return True

    def update_price(self, product_id, value: Optional[str]) -> bool:
        """Set a new price from an inline entry. Blank or None is a no-op."""
        if value is None or not str(value).strip():
            return False

        def send():
            price = parse_float(value, "Price")
            self.client.send_json("PUT", RESOURCE, product_id, payload={"price": price})

        if not self._attempt("Error updating the price.", send):
            return False
        self.load_available()
        return True

    def increment_stock(self, product_id, value: Optional[str]) -> bool:
        """Add units to stock from an inline entry. Blank or None is a no-op."""
        if value is None or not str(value).strip():
            return False

        def send():
            amount = parse_int(value, "Amount")
            self.client.send_json("PUT", RESOURCE, product_id, "stock", payload={"amount": amount})

        if not self._attempt("Error incrementing stock.", send):
            return False
        self.load_available()
        return True
