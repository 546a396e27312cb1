import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from pulse_api.api.errors import register_exception_handlers, unhandled_exception_handler
from pulse_api.api.routes import router as api_router
from pulse_api.core.config import settings
from pulse_api.core.constants import RPC_URL
from pulse_api.services.ledger_client import LedgerClient
from pulse_api.utils.web3_utils import get_web3

# Configurar logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.ledger = LedgerClient(get_web3(RPC_URL, settings.RPC_TIMEOUT))
    logger.info(f"Server is running on port {settings.PORT}")
    yield
    await app.state.ledger.close()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API de balances, tokens y precios en PulseChain",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Debe quedar dentro de CORS para cubrir también las respuestas 500
@app.middleware("http")
async def security_headers(request: Request, call_next):
    try:
        response = await call_next(request)
    except Exception as e:
        response = await unhandled_exception_handler(request, e)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
