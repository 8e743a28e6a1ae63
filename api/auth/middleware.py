"""
HTTP middleware that applies the access policy before any route runs.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from starlette.concurrency import run_in_threadpool
from starlette.responses import JSONResponse, Response

from .policy import AccessDecision, AccessPolicy

logger = logging.getLogger(__name__)


async def require_basic_auth(request: Request, call_next) -> Response:
    policy: AccessPolicy = request.app.state.access_policy
    path = request.url.path

    if policy.is_public(path):
        return await call_next(request)

    # bcrypt is CPU bound; keep it off the event loop.
    decision = await run_in_threadpool(
        policy.evaluate,
        path,
        request.headers.get("authorization"),
    )
    if decision is AccessDecision.UNAUTHORIZED:
        logger.warning(
            "auth_rejected method=%s path=%s client=%s",
            request.method,
            path,
            request.client.host if request.client else None,
        )
        return JSONResponse(
            {"detail": "Authentication required."},
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": policy.challenge()},
        )
    return await call_next(request)
