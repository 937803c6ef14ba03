# backend/main.py
from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from config import settings
from routes.stock import router as stock_router
from utils.notify import Notifier
from utils.stock_screen import StockScreen
from utils.store import build_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store=None, notifier=None) -> FastAPI:
    screen = StockScreen(store or build_store(settings), notifier or Notifier(), settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The product list is fetched once when the screen comes up
        await screen.load()
        yield

    app = FastAPI(title="Stock Browser API", version="1.0.0", lifespan=lifespan)
    app.state.screen = screen

    # CORS: local dev frontends plus the deployed one, if configured
    origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    if settings.FRONTEND_URL:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(stock_router, prefix="/stock")

    @app.get("/")
    def read_root():
        return {"message": "Stock Browser API is running"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
