from __future__ import annotations

import logging
from dataclasses import replace

from sfm.domain.models import ClientDraft, draft_from_client
from sfm.services.resource_screen import ResourceScreen, parse_int, required_text

log = logging.getLogger(__name__)

RESOURCE = "cliente"
FILTERS = ("all", "1", "2")


class ClientsScreen(ResourceScreen):
    def __init__(self, client):
        super().__init__(client)
        self.clients: list[dict] = []
        self.filter = "all"
        self.draft = ClientDraft()

    def load(self) -> bool:
        params = {"type": self.filter} if self.filter in ("1", "2") else None

        def fetch():
            self.clients = self.client.get_list(RESOURCE, params=params)

        return self._attempt("Could not load clients.", fetch, on_failure=self._clear)

    def _clear(self):
        self.clients = []

    def set_filter(self, value: str) -> bool:
        self.filter = value if value in FILTERS else "all"
        return self.load()

    def edit(self, record: dict) -> None:
        self.draft = draft_from_client(record)

    def update_draft(self, **fields) -> None:
        self.draft = replace(self.draft, **fields)

    def reset_draft(self) -> None:
        self.draft = ClientDraft()

    def _payload(self) -> dict:
        return {
            "nombre": required_text(self.draft.nombre, "Name"),
            "ciudad": required_text(self.draft.ciudad, "City"),
            "tipo": parse_int(self.draft.tipo, "Type"),
        }

    def submit(self) -> bool:
        def save():
            payload = self._payload()
            client_id = self.draft.id.strip()
            if client_id:
                self.client.send_json("PUT", RESOURCE, client_id, payload=payload)
            else:
                self.client.send_json("POST", RESOURCE, payload=payload)
            log.info("client_saved id=%s mode=%s", client_id or "-", "update" if client_id else "create")

        if not self._attempt("Error saving the client.", save):
            return False
        self.reset_draft()
        self.load()
        return True

    def delete(self, client_id) -> bool:
        def deactivate():
            self.client.request("DELETE", RESOURCE, client_id)

        if not self._attempt("Error deactivating the client.", deactivate):
            return False
        log.info("client_deactivated id=%s", client_id)
        self.load()
        return True
