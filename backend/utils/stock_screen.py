# backend/utils/stock_screen.py
"""State and data loading for the stock browsing screen.

One ``StockScreen`` holds the whole screen state in a ``StockViewState``.
Fetch failures are reported through the notifier and degrade the affected
list to empty; they never propagate to the caller.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError

from config import Settings, settings as default_settings
from schemas.product import Product, FIELD_KINDS
from schemas.stock import Movement, MovementView, StockViewState
from utils.catalog import apply_view, next_sort
from utils.movements import classify_movements
from utils.notify import Notifier
from utils.store import DataStore, FetchError

logger = logging.getLogger(__name__)

PRODUCTS_ERROR = "Error loading products."
MOVEMENTS_ERROR = "Error loading movements."


class StockScreen:
    def __init__(self, store: DataStore, notifier: Notifier, settings: Optional[Settings] = None):
        self.store = store
        self.notifier = notifier
        self.settings = settings or default_settings
        self.state = StockViewState()
        # Bumped on every selection change; fetch results carrying an older value are dropped
        self._selection_token = 0
        self._load_token = 0

    # ---- product list ----
    async def load(self) -> List[Product]:
        # Only the newest reload may write the list or clear the flag
        self._load_token += 1
        token = self._load_token
        self.state.loading = True
        try:
            rows = await self.store.fetch_all(self.settings.PRODUCTS_TABLE)
            products = [Product.model_validate(r) for r in rows or []]
        except (FetchError, ValidationError) as e:
            if token != self._load_token:
                logger.debug("Dropping failed product load superseded by a newer one")
                return self.state.products
            logger.error(f"Error loading products: {e}")
            self.state.products = []
            self.notifier.notify_error(PRODUCTS_ERROR)
        else:
            if token != self._load_token:
                logger.debug("Dropping product load superseded by a newer one")
                return self.state.products
            self.state.products = products
            logger.info("Loaded %d products", len(products))
        finally:
            if token == self._load_token:
                self.state.loading = False
        return self.state.products

    def set_search(self, text: str) -> None:
        self.state.search = text

    def set_sort(self, field: str, direction: str = "asc") -> None:
        if field not in FIELD_KINDS:
            raise ValueError(f"Unknown sort field: {field}")
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unknown sort direction: {direction}")
        self.state.sort_by = field
        self.state.order = direction

    def toggle_sort(self, field: str) -> None:
        self.set_sort(*next_sort(self.state.sort_by, self.state.order, field))

    def view(self) -> List[Product]:
        return apply_view(
            self.state.products,
            self.state.search,
            self.state.sort_by,
            self.state.order,
            trim=self.settings.SEARCH_TRIM,
        )

    def find_product(self, product_id) -> Optional[Product]:
        key = str(product_id)
        for p in self.state.products:
            if str(p.id) == key:
                return p
        return None

    # ---- movement ledger ----
    async def select_product(self, product: Product) -> List[MovementView]:
        self.state.selected_product = product
        return await self.load_movements(product.id)

    async def load_movements(self, product_id) -> List[MovementView]:
        self._selection_token += 1
        token = self._selection_token

        # No flash of the previous product's ledger while this one loads
        self.state.movements = []
        self.state.detail_open = False
        self.state.movements_loading = True

        try:
            rows = await self.store.fetch_filtered(
                self.settings.MOVEMENTS_TABLE, "producto_id", product_id, "fecha", descending=True
            )
            views = classify_movements(Movement.model_validate(r) for r in rows or [])
        except (FetchError, ValidationError) as e:
            if token != self._selection_token:
                logger.debug("Dropping failed movement fetch for stale selection %s", product_id)
                return []
            logger.error(f"Error loading movements for product {product_id}: {e}")
            self.state.movements = []
            self.state.movements_loading = False
            self.notifier.notify_error(MOVEMENTS_ERROR)
            return []

        if token != self._selection_token:
            logger.debug("Dropping movement fetch for stale selection %s", product_id)
            return views

        self.state.movements = views
        self.state.movements_loading = False
        self.state.detail_open = True
        return views

    def close_detail(self) -> None:
        self._selection_token += 1
        self.state.selected_product = None
        self.state.movements = []
        self.state.movements_loading = False
        self.state.detail_open = False

    def snapshot(self) -> StockViewState:
        return self.state.model_copy(deep=True)
