"""
Alke Wallet API Application Factory
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .. import __version__
from .accounts import router as accounts_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Alke Wallet API",
        description="In-memory USD/CLP wallet with transaction history",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "alke_wallet_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Alke Wallet API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "accounts": "/accounts",
            }
        }

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False):
    """Run the FastAPI server"""
    uvicorn.run(
        "alke_wallet.api:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
