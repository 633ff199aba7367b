from .clients_screen import ClientsScreen
from .products_screen import ProductsScreen
from .sales_screen import SalesScreen
from .excel_service import ExcelService

__all__ = [
    "ClientsScreen",
    "ProductsScreen",
    "SalesScreen",
    "ExcelService",
]
