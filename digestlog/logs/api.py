# -*- coding: utf-8 -*-
"""Log entries — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .models import CreateLogResponse, ErrorResponse, LogEntry, LogEntryCreate, SuccessResponse
from .storage import LogStore, StorageError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/logs", tags=["Logs"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def get_store(request: Request) -> LogStore:
    return request.app.state.store


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


@router.get("", response_model=List[LogEntry], responses=_ERROR_RESPONSES, summary="List log entries, newest first")
def list_logs(store: LogStore = Depends(get_store)):
    try:
        return store.list()
    except StorageError:
        logger.exception("Error fetching logs")
        return _error("Failed to fetch logs")


@router.post("", response_model=CreateLogResponse, responses=_ERROR_RESPONSES, summary="Create a log entry")
def create_log(request: LogEntryCreate, store: LogStore = Depends(get_store)):
    try:
        log_id = store.add(request)
    except StorageError:
        logger.exception("Error adding log")
        return _error("Failed to add log")
    return CreateLogResponse(id=log_id)


@router.delete("/{log_id}", response_model=SuccessResponse, responses=_ERROR_RESPONSES, summary="Delete a log entry")
def delete_log(log_id: int, store: LogStore = Depends(get_store)):
    # Deleting an unknown id is still a success.
    try:
        store.remove(log_id)
    except StorageError:
        logger.exception("Error deleting log %s", log_id)
        return _error("Failed to delete log")
    return SuccessResponse()
