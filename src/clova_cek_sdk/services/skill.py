"""Skill configuration and request dispatch."""

import asyncio
import inspect
import logging
import threading
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ..errors import HandlerNotFoundError
from ..models.request import RequestBody, RequestType
from .context import Context

RequestHandler = Callable[[Context], Awaitable[None] | None]
HttpHandler = Callable[[Request], Awaitable[Response]]
LambdaHandler = Callable[..., dict[str, Any]]


class SkillConfigurator:
    """
    Registry of request handlers plus the adapters that serve them.

    Register handlers first, then build an adapter with `handle()`,
    `lambda_()` or `firebase()`. The registry is not meant to change
    while requests are being served.
    """

    def __init__(self, logger: logging.Logger | None = None):
        """Initialize an empty registry.

        Args:
            logger: Where dispatch failures are reported. Defaults to this module's logger.
        """
        self.request_handlers: dict[RequestType, RequestHandler] = {}
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._lock = threading.Lock()

    def register(self, request_type: RequestType | str, request_handler: RequestHandler) -> bool:
        """
        Register a handler unless one is already registered for the type.

        Returns:
            True if the handler was stored, False if an earlier one was kept
        """
        request_type = RequestType(request_type)
        with self._lock:
            if request_type in self.request_handlers:
                return False
            self.request_handlers[request_type] = request_handler
            return True

    def on(self, request_type: RequestType | str, request_handler: RequestHandler) -> "SkillConfigurator":
        """Add a handler for a request type. The first handler registered wins."""
        self.register(request_type, request_handler)
        return self

    def on_launch_request(self, request_handler: RequestHandler) -> "SkillConfigurator":
        return self.on(RequestType.LAUNCH_REQUEST, request_handler)

    def on_intent_request(self, request_handler: RequestHandler) -> "SkillConfigurator":
        return self.on(RequestType.INTENT_REQUEST, request_handler)

    def on_event_request(self, request_handler: RequestHandler) -> "SkillConfigurator":
        return self.on(RequestType.EVENT_REQUEST, request_handler)

    def on_session_ended_request(self, request_handler: RequestHandler) -> "SkillConfigurator":
        return self.on(RequestType.SESSION_ENDED_REQUEST, request_handler)

    def find_handler(self, request_type: str) -> RequestHandler | None:
        """Handler for a request type tag, or None for unregistered or unknown types."""
        try:
            return self.request_handlers.get(RequestType(request_type))
        except ValueError:
            return None

    async def dispatch(self, payload: RequestBody | dict[str, Any]) -> dict[str, Any]:
        """
        Run the matching handler on a new Context and return the response payload.

        Raises:
            HandlerNotFoundError: No handler is registered for the request type
        """
        ctx = Context(payload)

        request_handler = self.find_handler(ctx.request_type)
        if request_handler is None:
            raise HandlerNotFoundError(ctx.request_type)

        result = request_handler(ctx)
        if inspect.isawaitable(result):
            await result

        return ctx.response_body()

    def handle(self) -> HttpHandler:
        """
        Create a FastAPI endpoint dispatching CEK requests.

        The body is taken from the verifier dependency when it ran, otherwise
        parsed as JSON. Failures are reported to the logger and answered with
        a bare 500.
        """

        async def clova_endpoint(request: Request) -> Response:
            try:
                payload = getattr(request.state, "clova_payload", None)
                if payload is None:
                    payload = await request.json()

                body = await self.dispatch(payload)
            except HandlerNotFoundError as e:
                self.logger.error(str(e))
                return Response(status_code=500)
            except Exception:
                self.logger.exception("Error handling CEK request")
                return Response(status_code=500)

            return JSONResponse(body)

        return clova_endpoint

    def lambda_(self) -> LambdaHandler:
        """
        Create an AWS Lambda handler taking the CEK payload as its event.

        Errors, including HandlerNotFoundError, propagate to the runtime.
        The handler runs its own event loop, so it must not be called from
        async code; there, use `await skill.dispatch(event)` instead.
        """

        def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                return asyncio.run(self.dispatch(event))
            raise RuntimeError("Lambda handler called inside a running event loop; await dispatch() instead")

        return lambda_handler

    def firebase(self) -> HttpHandler:
        """Same endpoint as `handle()`, under the name used for Cloud Functions deployments."""
        return self.handle()


class Client:
    @staticmethod
    def configure_skill(logger: logging.Logger | None = None) -> SkillConfigurator:
        """Create a SkillConfigurator for a CEK skill."""
        return SkillConfigurator(logger=logger)
