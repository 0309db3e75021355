"""CEK skill webhook endpoint."""

import logging

from fastapi import APIRouter, Depends

from ..middleware import middleware
from ..services.skill import SkillConfigurator

logger = logging.getLogger(__name__)


def build_router(
    configurator: SkillConfigurator,
    application_id: str | None = None,
    path: str = "/clova",
) -> APIRouter:
    """
    Build the router serving a skill.

    Requests are verified against `application_id` when one is given.
    Without it any well-formed JSON body is accepted, which is only
    suitable for local testing.
    """
    router = APIRouter(tags=["clova"])

    dependencies = []
    if application_id:
        dependencies.append(Depends(middleware(application_id)))
    else:
        logger.warning(f"Request verification disabled for {path}")

    router.add_api_route(
        path,
        configurator.handle(),
        methods=["POST"],
        dependencies=dependencies,
        include_in_schema=False,
    )
    return router
