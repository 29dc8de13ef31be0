# verification_gateway/dependencies.py
import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from .exceptions import InvalidRequestError
from .application.services import PricingService, VerificationService

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_verification_service(request: Request) -> VerificationService:
    return request.app.state.verification_service


def get_pricing_service(request: Request) -> PricingService:
    return request.app.state.pricing_service


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a JSON or form-encoded body; an absent body reads as an empty object."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.warning(f"Malformed JSON body on {request.url.path}")
        raise InvalidRequestError("Malformed JSON body")
    if not isinstance(data, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return data


def parse_payload(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidRequestError(f"{field}: {first.get('msg')}" if field else str(first.get("msg")))
