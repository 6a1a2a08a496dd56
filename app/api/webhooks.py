from __future__ import annotations

import json
import logging
from typing import Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.application.dto.webhook_request import WebhookRequestDTO
from app.application.use_cases import book_appointment, find_dress, select_dress
from app.application.utils.rich_content import text_message
from app.domain.entities.reply import WebhookReply
from app.wiring.dependencies import (
    get_book_appointment_use_case,
    get_find_dress_use_case,
    get_select_dress_use_case,
)


router = APIRouter()
logger = logging.getLogger(__name__)


async def _fulfill(request: Request, stage: str, build_use_case: Callable, apology_text: str) -> JSONResponse:
    """Run one stage. Faults are reported in the messages; the status is always 200."""
    apology = WebhookReply(messages=[text_message(apology_text)])
    try:
        try:
            use_case = build_use_case()
        except Exception as e:
            logger.exception("Failed to initialize use case", extra={"stage": stage, "error": str(e)})
            return JSONResponse(content=apology.to_payload())

        body = await request.body()
        try:
            payload = json.loads(body.decode("utf-8")) if body else {}
            event = WebhookRequestDTO.model_validate(payload)
        except Exception as e:
            logger.exception("Failed to parse webhook body", extra={"stage": stage, "error": str(e)})
            return JSONResponse(content=apology.to_payload())

        reply = await run_in_threadpool(use_case.execute, event.to_session_state())
        return JSONResponse(content=reply.to_payload())
    except Exception as e:
        logger.exception("Fatal error in webhook handler", extra={"stage": stage, "error": str(e)})
        return JSONResponse(content=apology.to_payload())


@router.post("/webhooks/find-dress")
async def find_dress_webhook(request: Request) -> JSONResponse:
    return await _fulfill(request, "find_dress", get_find_dress_use_case, find_dress.APOLOGY_TEXT)


@router.post("/webhooks/select-dress")
async def select_dress_webhook(request: Request) -> JSONResponse:
    return await _fulfill(request, "select_dress", get_select_dress_use_case, select_dress.APOLOGY_TEXT)


@router.post("/webhooks/book-appointment")
async def book_appointment_webhook(request: Request) -> JSONResponse:
    return await _fulfill(
        request,
        "book_appointment",
        get_book_appointment_use_case,
        book_appointment.APOLOGY_TEXT,
    )
