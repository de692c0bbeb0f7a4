# Standard library imports
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

# Local application imports
from .store import ProductListStore


@dataclass(frozen=True)
class LoadingView:
    pass


@dataclass(frozen=True)
class ErrorView:
    message: str


@dataclass(frozen=True)
class ProductGridView:
    products: List[Dict[str, Any]]
    page: int
    pages: int
    keyword: str = ""


ListingView = Union[LoadingView, ErrorView, ProductGridView]


@dataclass(frozen=True)
class HomeView:
    """What the home screen shows for the current store state"""
    title: str
    show_carousel: bool
    show_back_link: bool
    listing: ListingView


class HomeScreen:
    """
    Product browsing screen.

    Fetches once on mount and again only when the keyword or page number
    changes; rendering maps the shared listing state onto exactly one of
    loading, error or product grid.
    """

    title = "Latest Products"

    def __init__(self, store: ProductListStore) -> None:
        self.store = store
        self._params: Optional[Tuple[Optional[str], int]] = None

    @staticmethod
    def _normalize(keyword: Optional[str], page_number: Optional[Union[int, str]]) -> Tuple[Optional[str], int]:
        return (keyword or None, int(page_number or 1))

    @property
    def keyword(self) -> Optional[str]:
        return self._params[0] if self._params else None

    @property
    def page_number(self) -> int:
        return self._params[1] if self._params else 1

    async def mount(self, keyword: Optional[str] = None, page_number: Optional[Union[int, str]] = None) -> None:
        self._params = self._normalize(keyword, page_number)
        await self.store.list_products(*self._params)

    async def update(self, keyword: Optional[str] = None, page_number: Optional[Union[int, str]] = None) -> bool:
        """
        React to new route parameters.

        Returns:
            True if a fetch was dispatched, False when nothing changed
        """
        params = self._normalize(keyword, page_number)
        if params == self._params:
            return False
        self._params = params
        await self.store.list_products(*params)
        return True

    def render(self) -> HomeView:
        state = self.store.state
        listing: ListingView
        if state.loading:
            listing = LoadingView()
        elif state.error:
            listing = ErrorView(message=state.error)
        else:
            listing = ProductGridView(
                products=list(state.products),
                page=state.page,
                pages=state.pages,
                keyword=self.keyword or "",
            )

        return HomeView(
            title=self.title,
            show_carousel=not self.keyword,
            show_back_link=bool(self.keyword),
            listing=listing,
        )
