"""
Client-side state for the product listing.

A single ``ProductListStore`` holds the listing state shared by every screen;
state only changes through ``dispatch`` and the pure reducer below.
"""
# Standard library imports
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

# Local application imports
from ..infrastructure.external.catalog_client import CatalogClient, CatalogError, ProductPage

logger = logging.getLogger(__name__)


class ProductListAction(str, Enum):
    REQUEST = "PRODUCT_LIST_REQUEST"
    SUCCESS = "PRODUCT_LIST_SUCCESS"
    FAIL = "PRODUCT_LIST_FAIL"


@dataclass(frozen=True)
class ProductListState:
    loading: bool = False
    error: Optional[str] = None
    products: List[Dict[str, Any]] = field(default_factory=list)
    page: int = 1
    pages: int = 1


def product_list_reducer(
    state: ProductListState,
    action: ProductListAction,
    payload: Any = None,
) -> ProductListState:
    """Return the next state; never mutates ``state``."""
    if action == ProductListAction.REQUEST:
        return replace(state, loading=True, error=None, products=[])
    if action == ProductListAction.SUCCESS:
        page: ProductPage = payload
        return ProductListState(
            loading=False,
            products=list(page.products),
            page=page.page,
            pages=page.pages,
        )
    if action == ProductListAction.FAIL:
        return replace(state, loading=False, error=str(payload))
    return state


Listener = Callable[[ProductListState], None]


class ProductListStore:
    """Holds the product listing state and performs the fetch"""

    def __init__(self, catalog_client: CatalogClient) -> None:
        self.catalog_client = catalog_client
        self._state = ProductListState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ProductListState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action: ProductListAction, payload: Any = None) -> None:
        self._state = product_list_reducer(self._state, action, payload)
        for listener in list(self._listeners):
            listener(self._state)

    async def list_products(self, keyword: Optional[str] = None, page_number: int = 1) -> None:
        self.dispatch(ProductListAction.REQUEST)
        try:
            page = await self.catalog_client.list_products(keyword=keyword, page_number=page_number)
        except CatalogError as exception:
            logger.warning(f"Product listing failed: {exception}")
            self.dispatch(ProductListAction.FAIL, str(exception))
            return
        self.dispatch(ProductListAction.SUCCESS, page)
