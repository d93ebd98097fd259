"""
Contacts API — Professional Profile Route
===========================================

GET /professional returns the stored profile, or the fallback literal when
none exists or the store is unavailable. It always answers 200.
"""

from fastapi import APIRouter, Depends

from contacts_api.database import get_store
from contacts_api.schemas.professional import ProfessionalProfile
from contacts_api.services.professional_service import professional_service
from contacts_api.storage import DocumentStore

router = APIRouter(tags=["Professional"])


@router.get(
    "/professional",
    response_model=ProfessionalProfile,
    response_model_exclude_none=True,
    summary="Get the professional profile",
)
async def get_professional(store: DocumentStore = Depends(get_store)) -> ProfessionalProfile:
    return await professional_service.get_profile(store)
