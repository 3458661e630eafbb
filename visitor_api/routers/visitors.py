from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from visitor_api.services.errors import (
    DuplicateEmailError,
    StorageError,
    VisitorValidationError,
)
from visitor_api.services.registration_service import RegistrationService

router = APIRouter(tags=["visitors"])
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration successful! Data saved to database."


def _get_registration_service(request: Request) -> RegistrationService:
    svc = getattr(getattr(request.app, "state", None), "registration_service", None)
    if not svc:
        raise RuntimeError("RegistrationService not configured")
    return svc


@router.post("/")
async def register_visitor(request: Request):
    logger.info("Processing visitor registration request.")
    try:
        svc = _get_registration_service(request)
        raw_body = await request.body()
        visitor = await run_in_threadpool(svc.register, raw_body)
    except VisitorValidationError as exc:
        return JSONResponse({"error": exc.message}, status_code=400)
    except DuplicateEmailError as exc:
        return JSONResponse({"error": exc.message}, status_code=409)
    except StorageError:
        logger.error("Failed to save visitor to database")
        return Response(status_code=500)
    except Exception:
        logger.exception("Unexpected error processing visitor registration")
        return Response(status_code=500)
    logger.info("Successfully registered visitor: %s (%s)", visitor.name, visitor.email)
    return {"message": SUCCESS_MESSAGE}
