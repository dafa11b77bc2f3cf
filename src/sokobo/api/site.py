"""Contact form and admin dashboard figures."""

from fastapi import APIRouter, Depends

from sokobo.api.dependencies import ADMIN_ONLY, get_storage
from sokobo.api.schemas import AnalyticsResponse, ContactRequest, MessageResponse
from sokobo.insights.analytics import sales_summary
from sokobo.insights.contact import submit_contact
from sokobo.store.storage import Storage

router = APIRouter(prefix="/api", tags=["site"])


@router.post("/contact", response_model=MessageResponse)
async def contact(body: ContactRequest) -> MessageResponse:
    return MessageResponse(message=submit_contact(**body.model_dump()))


@router.get("/analytics", response_model=AnalyticsResponse, dependencies=ADMIN_ONLY)
async def analytics(storage: Storage = Depends(get_storage)) -> AnalyticsResponse:
    return AnalyticsResponse(**sales_summary(storage))
