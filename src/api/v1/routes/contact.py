"""Contact form API route."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.body import JsonBody
from api.v1.dependencies import get_contact_service
from api.v1.schemas.contact import ContactResponse
from core.rate_limit import limiter
from domain.normalizers.common import as_mapping
from domain.services.contact_service import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post(
    "",
    response_model=ContactResponse,
    summary="Send a contact message",
    responses={
        400: {"description": "Missing fields or message too long"},
        503: {"description": "Email service unavailable"},
    },
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def submit_contact(
    request: Request,
    body: JsonBody,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """
    Public contact form.

    Body: ``{name, email?, subject, messageHtml?, message?}``. The rich-text
    ``messageHtml`` wins over the plain ``message`` when it has any text.
    """
    await service.submit(as_mapping(body))
    return ContactResponse()
