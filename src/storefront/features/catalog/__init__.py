"""
Catalog package: product fetch, debounced search and product cards.
"""

from .service import CatalogService, CatalogState
from .debounce import (
    DESKTOP_SEARCH_DEBOUNCE_MS,
    MOBILE_SEARCH_DEBOUNCE_MS,
    Debouncer,
    SearchDebouncer,
)
from .presenter import CatalogPresenter

__all__ = [
    'CatalogService',
    'CatalogState',
    'CatalogPresenter',
    'Debouncer',
    'SearchDebouncer',
    'DESKTOP_SEARCH_DEBOUNCE_MS',
    'MOBILE_SEARCH_DEBOUNCE_MS',
]
