from .clients_view import ClientsView
from .products_view import ProductsView
from .sales_view import SalesView

__all__ = ["ClientsView", "ProductsView", "SalesView"]
