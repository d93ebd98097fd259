"""
Contacts API — Professional Profile Service
=============================================

What:  Reads the professional profile shown by GET /professional.
How:   Returns the first document of the `professionals` collection. When the
       collection is empty, the store cannot be reached, or the stored document
       does not fit the profile schema, returns FALLBACK_PROFILE instead.
       This path never writes to the store and never raises to the caller.
"""

import copy
import logging
from typing import Any, Dict

from pydantic import ValidationError as SchemaValidationError

from contacts_api.exceptions import DatabaseError
from contacts_api.schemas.professional import ProfessionalProfile
from contacts_api.storage import PROFESSIONALS, DocumentStore

logger = logging.getLogger(__name__)


FALLBACK_PROFILE: Dict[str, Any] = {
    "professionalName": "Victor Boluwatife",
    "base64Image": "https://avatars.githubusercontent.com/u/9919?s=200&v=4",
    "nameLink": {
        "firstName": "Victor",
        "url": "https://github.com/",
    },
    "workDescription1": (
        "Software developer building web services and APIs with a focus on "
        "clean, well-documented backends."
    ),
    "workDescription2": (
        "Currently learning cloud deployment, document databases and API "
        "documentation tooling."
    ),
    "linkTitleText": "Find me online:",
    "linkedInLink": {
        "text": "LinkedIn",
        "link": "https://www.linkedin.com/",
    },
    "githubLink": {
        "text": "GitHub",
        "link": "https://github.com/",
    },
}


class ProfessionalService:
    """Read-only access to the singleton professional profile."""

    async def get_profile(self, store: DocumentStore) -> ProfessionalProfile:
        try:
            document = await store.find_first(PROFESSIONALS)
        except DatabaseError as e:
            logger.error("Could not load professional profile, serving fallback: %s", e.message)
            document = None

        if document is not None:
            try:
                return ProfessionalProfile.model_validate(document)
            except SchemaValidationError as e:
                logger.error(
                    "Stored professional profile %s is malformed, serving fallback: %s",
                    document.get("id"),
                    e,
                )
        return ProfessionalProfile.model_validate(copy.deepcopy(FALLBACK_PROFILE))


professional_service = ProfessionalService()
