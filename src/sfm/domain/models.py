from __future__ import annotations
from dataclasses import dataclass

DEFAULT_SALE_ITEMS = '[{"id":"1","cantidad":1,"precio":0}]'

CLIENT_TYPES = {1: "Normal", 2: "Premium"}


@dataclass(frozen=True)
class ClientDraft:
    id: str = ""
    nombre: str = ""
    ciudad: str = ""
    tipo: str = "1"


@dataclass(frozen=True)
class ProductDraft:
    id: str = ""
    name: str = ""
    price: str = ""
    stock: str = ""


@dataclass(frozen=True)
class SaleDraft:
    cliente_id: str = ""
    items: str = DEFAULT_SALE_ITEMS
    fecha: str = ""


def client_type_label(tipo: object) -> str:
    try:
        return CLIENT_TYPES.get(int(tipo), "Inactive")
    except (TypeError, ValueError):
        return "Inactive"


def _text(value: object) -> str:
    return "" if value is None else str(value)


def draft_from_client(record: dict) -> ClientDraft:
    return ClientDraft(
        id=_text(record.get("id")),
        nombre=_text(record.get("nombre")),
        ciudad=_text(record.get("ciudad")),
        tipo=_text(record.get("tipo")),
    )


def draft_from_product(record: dict) -> ProductDraft:
    return ProductDraft(
        id=_text(record.get("productoID")),
        name=_text(record.get("nombre")),
        price=_text(record.get("precio")),
        stock=_text(record.get("stock")),
    )


def client_type_value(label: str, current: str) -> str:
    """Map a type label back to its value; labels without one keep ``current``."""
    for value, name in CLIENT_TYPES.items():
        if name == label:
            return str(value)
    return current
