"""
OpenAI Web Search Bridge - HTTP surface for the web search tools.
Exposes tool listing and invocation; see mcp_server.py for the stdio MCP server.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from auth import APIKeyMiddleware
from config import Config
from routes import tools
from routes.errors import register_exception_handlers
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"{Config.APP_TITLE} v{Config.VERSION} starting")
    yield
    await HTTPClientManager.close_all()


def create_app() -> FastAPI:
    app = FastAPI(title=Config.APP_TITLE, version=Config.VERSION, lifespan=lifespan)

    register_exception_handlers(app)
    app.add_middleware(APIKeyMiddleware)

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {"message": f"{Config.APP_TITLE} is running"}

    app.include_router(tools.router, tags=["tools"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
