"""
Route handlers for tool listing and invocation over HTTP.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends

from config import Config
from services.dispatcher import OperationDispatcher
from services.forwarder import RequestForwarder
from utils.logger import app_logger

router = APIRouter()


def get_dispatcher() -> OperationDispatcher:
    """Build the dispatcher for a request from process-wide configuration."""
    return OperationDispatcher(RequestForwarder(Config.OPENAI_API_KEY))


@router.get("/tools")
async def list_tools(dispatcher: OperationDispatcher = Depends(get_dispatcher)):
    """List the available tools and their input schemas."""
    return {"tools": dispatcher.list_tools()}


@router.post("/tools/{name}")
async def call_tool(
    name: str,
    arguments: Any = Body(default=None),
    dispatcher: OperationDispatcher = Depends(get_dispatcher),
):
    """
    Invoke a tool with the request body as its arguments.
    Classified errors are rendered by the handlers in routes.errors.
    """
    app_logger.info(f"HTTP tool call: {name}")
    return await dispatcher.dispatch(name, arguments)
