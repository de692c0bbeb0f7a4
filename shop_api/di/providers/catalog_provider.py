from typing import TYPE_CHECKING
from ...infrastructure.external.catalog_client import CatalogClient
from ...catalog.store import ProductListStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog browsing provider - one shared listing store per container"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        catalog_client = CatalogClient()
        container.register_singleton(CatalogClient, catalog_client)
        container.register_singleton(ProductListStore, ProductListStore(catalog_client))
