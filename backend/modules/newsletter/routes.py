"""
Newsletter subscription endpoints.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_subscriber_repository
from shared.models import SuccessResponse

from .models import SubscriberData, SubscriberResponse, SubscriptionRequest
from .repository import SubscriberRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/subscribe", response_model=SubscriberResponse, status_code=status.HTTP_201_CREATED)
async def subscribe(
    request: SubscriptionRequest,
    repository: SubscriberRepository = Depends(get_subscriber_repository),
) -> SubscriberResponse:
    """Subscribe an email to the newsletter."""
    subscriber = await repository.subscribe(request.email)
    logger.info(f"Newsletter subscription: {subscriber.id}")
    return SubscriberResponse(
        message="Subscribed successfully",
        data=SubscriberData(subscriber=subscriber),
    )


@router.post("/unsubscribe", response_model=SuccessResponse[None])
async def unsubscribe(
    request: SubscriptionRequest,
    repository: SubscriberRepository = Depends(get_subscriber_repository),
) -> SuccessResponse[None]:
    """Remove an email from the newsletter."""
    await repository.unsubscribe(request.email)
    return SuccessResponse[None](message="Unsubscribed successfully")
