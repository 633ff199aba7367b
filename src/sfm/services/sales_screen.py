from __future__ import annotations

import json
import logging
import math
from dataclasses import replace
from datetime import date

from sfm.domain.errors import ApiError, AppError, ValidationError
from sfm.domain.models import DEFAULT_SALE_ITEMS, SaleDraft
from sfm.services.resource_screen import ResourceScreen

log = logging.getLogger("sfm.sales")

RESOURCE = "venta"
REGISTER_ERROR = "Error registering the sale."
QUERY_ERROR = "Error querying sales."
QUERY_MISSING_FIELDS = "Fill in client and date to run the query."


def _number(value: object) -> float:
    # JSON true/false decode to bool, which int() and float() would accept
    if isinstance(value, bool):
        raise ValidationError(REGISTER_ERROR)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(REGISTER_ERROR) from None
    if not math.isfinite(number):
        raise ValidationError(REGISTER_ERROR)
    return number


def _whole_number(value: object) -> int:
    number = _number(value)
    if not number.is_integer():
        raise ValidationError(REGISTER_ERROR)
    return int(number)


def parse_sale_items(text: str) -> list[dict]:
    """
    Parse the free-text line items field.

    Expected: a JSON array of objects like {"id": "1", "cantidad": 2, "precio": 1500}.
    Missing cantidad/precio fall back to 1/0, the same values the empty form shows.
    """
    try:
        raw = json.loads(text or "")
    except ValueError:
        raise ValidationError(REGISTER_ERROR) from None
    if not isinstance(raw, list) or not raw:
        raise ValidationError(REGISTER_ERROR)

    items = []
    for it in raw:
        if not isinstance(it, dict) or it.get("id") in (None, ""):
            raise ValidationError(REGISTER_ERROR)
        qty = _whole_number(it.get("cantidad", 1))
        price = _number(it.get("precio", 0))
        items.append({**it, "cantidad": qty, "precio": price})
    return items


def _query_failure(e: AppError) -> str:
    if isinstance(e, ApiError):
        return str(e)
    return QUERY_ERROR


class SalesScreen(ResourceScreen):
    def __init__(self, client):
        super().__init__(client)
        self.draft = SaleDraft()
        self.results: list[dict] = []
        self.notice = ""

    def update_draft(self, **fields) -> None:
        self.draft = replace(self.draft, **fields)

    def register_sale(self) -> bool:
        self.notice = ""

        def send():
            cliente_id = self.draft.cliente_id.strip()
            if not cliente_id:
                raise ValidationError("Client ID is required.")
            items = parse_sale_items(self.draft.items)
            self.client.send_json("POST", RESOURCE, payload={"clienteId": cliente_id, "productos": items})
            log.info("sale_registered cliente_id=%s items=%s", cliente_id, len(items))

        if not self._attempt(REGISTER_ERROR, send):
            return False
        self.notice = "Sale registered."
        # the date is kept so the user can query right after registering
        self.draft = replace(self.draft, cliente_id="", items=DEFAULT_SALE_ITEMS)
        return True

    def query(self) -> bool:
        cliente_id = self.draft.cliente_id.strip()
        fecha = self.draft.fecha.strip()
        if not cliente_id or not fecha:
            self.error = QUERY_MISSING_FIELDS
            return False
        try:
            date.fromisoformat(fecha)
        except ValueError:
            self.error = "Date must use the YYYY-MM-DD format."
            return False

        def fetch():
            self.results = self.client.get_list(RESOURCE, "cliente", cliente_id, "fecha", fecha)

        def clear():
            self.results = []

        return self._attempt(_query_failure, fetch, on_failure=clear)
