"""Catalog browsing view: shared listing state and the home screen."""

from .store import ProductListAction, ProductListState, ProductListStore, product_list_reducer
from .home_screen import ErrorView, HomeScreen, HomeView, LoadingView, ProductGridView

__all__ = [
    "ProductListAction",
    "ProductListState",
    "ProductListStore",
    "product_list_reducer",
    "ErrorView",
    "HomeScreen",
    "HomeView",
    "LoadingView",
    "ProductGridView",
]
