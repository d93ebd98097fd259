"""
Contacts API — Professional Profile Schema
============================================

What:  Pydantic model for the single professional profile record.
Who:   Returned by GET /professional.

The record is read-only from this service's point of view; it is loaded
into the `professionals` collection out of band.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NameLink(BaseModel):
    firstName: Optional[str] = None
    url: Optional[str] = None


class LabeledLink(BaseModel):
    text: Optional[str] = None
    link: Optional[str] = None


class ProfessionalProfile(BaseModel):
    """
    A professional profile.

    base64Image holds either an inline base64-encoded image or an external
    image URL; clients render whichever they receive.
    """
    professionalName: Optional[str] = None
    base64Image: Optional[str] = Field(
        default=None, description="Inline base64 image data or an external image URL"
    )
    nameLink: Optional[NameLink] = None
    workDescription1: Optional[str] = None
    workDescription2: Optional[str] = None
    linkTitleText: Optional[str] = None
    linkedInLink: Optional[LabeledLink] = Field(
        default=None, description="Professional-network profile link"
    )
    githubLink: Optional[LabeledLink] = Field(default=None, description="Code-hosting profile link")

    model_config = ConfigDict(extra="ignore")
