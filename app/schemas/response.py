"""
Response schemas for the social post generator.
Defines all output models.
"""

from pydantic import BaseModel, Field
from typing import Optional, List


class PostVariant(BaseModel):
    """One normalized candidate post."""
    hook: str = Field(..., description="Short attention-grabbing first line, at most 120 characters")
    caption: str = Field(..., description="Full post text")
    hashtags: List[str] = Field(default_factory=list, description="Tags, each starting with a single '#'")


class GenerationResponse(BaseModel):
    """
    Successful generate-post response.
    Echoes the resolved request parameters next to the normalized variants.
    """

    success: bool = True

    topic: str
    platform: str
    tone: str
    language: str
    goal: str
    audience: str
    style: str

    variants_count: int = Field(
        ...,
        alias="variantsCount",
        description="Number of variants actually produced"
    )
    requested_variants_count: int = Field(
        ...,
        alias="requestedVariantsCount",
        description="Number of variants asked of the model after clamping"
    )
    variants: List[PostVariant]

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "success": True,
                "topic": "Spring sale on handmade candles",
                "platform": "instagram",
                "tone": "friendly",
                "language": "en",
                "goal": "sales",
                "audience": "small_business",
                "style": "post",
                "variantsCount": 1,
                "requestedVariantsCount": 1,
                "variants": [
                    {
                        "hook": "Spring just got cozier",
                        "caption": "Spring just got cozier. 20% off every hand-poured candle this week only!",
                        "hashtags": ["#candles", "#springsale", "#shopsmall"]
                    }
                ]
            }
        }


class HealthResponse(BaseModel):
    """Health check payload."""
    ok: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    details: Optional[str] = None
