"""Request verification as a FastAPI route dependency."""

import logging
from typing import Any, Awaitable, Callable

from fastapi import Request

from .config import settings
from .errors import VerificationError
from .services.verifier import verify

logger = logging.getLogger(__name__)

VerifierDependency = Callable[[Request], Awaitable[dict[str, Any]]]


def middleware(application_id: str, signature_header: str | None = None) -> VerifierDependency:
    """
    Create a dependency that verifies CEK requests before the skill endpoint runs.

    Mount it on the skill route:

        router.add_api_route("/clova", skill.handle(), methods=["POST"],
                             dependencies=[Depends(middleware(APPLICATION_ID))])

    The verified payload replaces the body for the endpoint (it is stored on
    `request.state.clova_payload`). Verification errors are raised as-is and
    left to the app's exception handlers.
    """
    header = signature_header or settings.signature_header

    async def verify_clova_request(request: Request) -> dict[str, Any]:
        signature = request.headers.get(header)
        raw_body = await request.body()

        try:
            payload = verify(signature, application_id, raw_body)
        except VerificationError as e:
            logger.warning(f"CEK request rejected: {e}")
            raise

        request.state.clova_payload = payload
        return payload

    return verify_clova_request


Middleware = middleware
