from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from ...core import FormattingError, FormattingService
from ...schemas import ToolDescriptor, ToolResult
from ...tools import call_tool, list_tools
from ..dependencies import get_service

router = APIRouter(prefix="/tools", tags=["tools"])

ERROR_STATUS = {
    "UNKNOWN_TOOL": 404,
    "INVALID_ARGUMENTS": 422,
    "WRITE_FAILED": 500,
}


@router.get("", summary="List available operations")
def describe_tools() -> list[ToolDescriptor]:
    return list_tools()


@router.post("/{name}", summary="Run an operation")
def run_tool(
    name: str,
    arguments: dict[str, Any] = Body(...),
    service: FormattingService = Depends(get_service),
) -> ToolResult:
    try:
        return call_tool(service, name, arguments)
    except FormattingError as exc:
        raise HTTPException(status_code=ERROR_STATUS.get(exc.code, 400), detail=exc.code) from exc


__all__ = ["router"]
