from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from sfm.api.rest_client import RestClient
from sfm.config import AppConfig
from sfm.services.clients_screen import ClientsScreen
from sfm.services.excel_service import ExcelService
from sfm.services.products_screen import ProductsScreen
from sfm.services.sales_screen import SalesScreen


@dataclass(frozen=True)
class AppContainer:
    config: AppConfig
    api: RestClient
    clients: ClientsScreen
    products: ProductsScreen
    sales: SalesScreen
    excel: ExcelService


def build_container(config: AppConfig, session: Optional[requests.Session] = None) -> AppContainer:
    api = RestClient(config.api_base_url, session=session, timeout=config.request_timeout)

    return AppContainer(
        config=config,
        api=api,
        clients=ClientsScreen(api),
        products=ProductsScreen(api),
        sales=SalesScreen(api),
        excel=ExcelService(),
    )
