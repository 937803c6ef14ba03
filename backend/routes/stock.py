# backend/routes/stock.py
from fastapi import APIRouter, Depends, HTTPException, Request

from schemas.product import ProductListResponse, ViewUpdate, SortField
from schemas.stock import MovementDetailResponse, NoticeList
from utils.stock_screen import StockScreen

router = APIRouter(tags=["Stock"])


def get_screen(request: Request) -> StockScreen:
    return request.app.state.screen


def _list_response(screen: StockScreen) -> dict:
    items = screen.view()
    state = screen.state
    return {
        "items": items,
        "total": len(items),
        "loaded": len(state.products),
        "search": state.search,
        "sort_by": state.sort_by,
        "order": state.order,
        "loading": state.loading,
    }


def _detail_response(screen: StockScreen) -> dict:
    state = screen.state
    return {
        "product": state.selected_product,
        "movements": state.movements,
        "detail_open": state.detail_open,
        "loading": state.movements_loading,
    }


# =========================
# PRODUCT LIST
# =========================
@router.get("/products", response_model=ProductListResponse)
async def list_products(screen: StockScreen = Depends(get_screen)):
    return _list_response(screen)


@router.patch("/view", response_model=ProductListResponse)
async def update_view(payload: ViewUpdate, screen: StockScreen = Depends(get_screen)):
    if payload.search is not None:
        screen.set_search(payload.search)
    if payload.sort_by is not None or payload.order is not None:
        screen.set_sort(payload.sort_by or screen.state.sort_by, payload.order or screen.state.order)
    return _list_response(screen)


@router.post("/sort/{field}", response_model=ProductListResponse)
async def toggle_sort(field: SortField, screen: StockScreen = Depends(get_screen)):
    """Column header click: same column flips direction, a new one sorts ascending."""
    screen.toggle_sort(field)
    return _list_response(screen)


@router.post("/reload", response_model=ProductListResponse)
async def reload_products(screen: StockScreen = Depends(get_screen)):
    await screen.load()
    return _list_response(screen)


# =========================
# MOVEMENT LEDGER
# =========================
@router.post("/products/{product_id}/movements", response_model=MovementDetailResponse)
async def open_movements(product_id: str, screen: StockScreen = Depends(get_screen)):
    product = screen.find_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    await screen.select_product(product)
    return _detail_response(screen)


@router.get("/detail", response_model=MovementDetailResponse)
async def get_detail(screen: StockScreen = Depends(get_screen)):
    return _detail_response(screen)


@router.delete("/detail", response_model=MovementDetailResponse)
async def close_detail(screen: StockScreen = Depends(get_screen)):
    screen.close_detail()
    return _detail_response(screen)


@router.get("/notices", response_model=NoticeList)
async def drain_notices(screen: StockScreen = Depends(get_screen)):
    return {"items": screen.notifier.drain()}
