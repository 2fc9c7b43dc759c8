"""
Contact form endpoint.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_contact_repository

from .models import ContactData, ContactRequest, ContactResponse
from .repository import ContactRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    request: ContactRequest,
    repository: ContactRepository = Depends(get_contact_repository),
) -> ContactResponse:
    """Store a contact form message."""
    contact = await repository.create(request)
    logger.info(f"Contact message received: {contact.id}")
    return ContactResponse(
        message="Message sent successfully",
        data=ContactData(contact=contact),
    )
