"""External service clients for communicating with external systems"""

from .catalog_client import CatalogClient, CatalogError, ProductPage

__all__ = [
    "CatalogClient",
    "CatalogError",
    "ProductPage",
]
