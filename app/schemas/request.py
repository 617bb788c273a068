"""
Request schemas for the social post generator.
Every option is resolved to a recognized value; only the topic can reject a request.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, Type
from enum import Enum


MIN_VARIANTS = 1
MAX_VARIANTS = 3
DEFAULT_VARIANTS = 3

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class PlatformType(str, Enum):
    """Social platforms a post can target."""
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    TIKTOK = "tiktok"


class ToneType(str, Enum):
    """Available tone options for posts."""
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    PLAYFUL = "playful"
    BOLD = "bold"
    INSPIRATIONAL = "inspirational"


class LanguageType(str, Enum):
    """Output languages, as ISO 639-1 codes."""
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"


class GoalType(str, Enum):
    """What the post is supposed to achieve."""
    ENGAGEMENT = "engagement"
    SALES = "sales"
    LEADS = "leads"
    AWARENESS = "awareness"
    TRAFFIC = "traffic"


class AudienceType(str, Enum):
    """Target audience types."""
    GENERAL = "general"
    SMALL_BUSINESS = "small_business"
    YOUNG_ADULTS = "young_adults"
    PROFESSIONALS = "professionals"
    PARENTS = "parents"


class StyleType(str, Enum):
    """Message format."""
    POST = "post"    # Public social post
    DM = "dm"        # Direct message
    EMAIL = "email"  # Short marketing email


def resolve_choice(value: Any, choices: Type[Enum], default: Enum) -> Enum:
    """Match a raw value against an enum case-insensitively, falling back to the default."""
    if isinstance(value, choices):
        return value
    if not isinstance(value, str):
        return default
    try:
        return choices(value.strip().lower())
    except ValueError:
        return default


def resolve_flag(value: Any, default: bool = True) -> bool:
    """Coerce a loosely typed flag. Anything unrecognized keeps the default."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def clamp_variants_count(value: Any) -> int:
    """Clamp the requested number of variants into [MIN_VARIANTS, MAX_VARIANTS]."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_VARIANTS
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_VARIANTS
    return max(MIN_VARIANTS, min(MAX_VARIANTS, count))


class GenerationRequest(BaseModel):
    """
    Parameters for one generate-post call.
    Field names are snake_case in Python and camelCase on the wire.
    """

    topic: Optional[str] = Field(
        default=None,
        description="The main topic or subject of the post"
    )

    platform: PlatformType = Field(default=PlatformType.INSTAGRAM)
    tone: ToneType = Field(default=ToneType.FRIENDLY)
    language: LanguageType = Field(default=LanguageType.ENGLISH)
    goal: GoalType = Field(default=GoalType.ENGAGEMENT)
    audience: AudienceType = Field(default=AudienceType.GENERAL)
    style: StyleType = Field(default=StyleType.POST)

    variants_count: int = Field(
        default=DEFAULT_VARIANTS,
        alias="variantsCount",
        description="Number of variants to ask for, clamped to 1-3"
    )

    include_urgency: bool = Field(default=True, alias="includeUrgency")
    include_social_proof: bool = Field(default=True, alias="includeSocialProof")
    mention_ai: bool = Field(default=True, alias="mentionAI")

    @field_validator("topic", mode="before")
    @classmethod
    def _strip_topic(cls, value: Any) -> Optional[str]:
        # Anything but a string counts as a missing topic
        if not isinstance(value, str):
            return None
        return value.strip()

    @field_validator("platform", mode="before")
    @classmethod
    def _resolve_platform(cls, value: Any) -> PlatformType:
        return resolve_choice(value, PlatformType, PlatformType.INSTAGRAM)

    @field_validator("tone", mode="before")
    @classmethod
    def _resolve_tone(cls, value: Any) -> ToneType:
        return resolve_choice(value, ToneType, ToneType.FRIENDLY)

    @field_validator("language", mode="before")
    @classmethod
    def _resolve_language(cls, value: Any) -> LanguageType:
        return resolve_choice(value, LanguageType, LanguageType.ENGLISH)

    @field_validator("goal", mode="before")
    @classmethod
    def _resolve_goal(cls, value: Any) -> GoalType:
        return resolve_choice(value, GoalType, GoalType.ENGAGEMENT)

    @field_validator("audience", mode="before")
    @classmethod
    def _resolve_audience(cls, value: Any) -> AudienceType:
        return resolve_choice(value, AudienceType, AudienceType.GENERAL)

    @field_validator("style", mode="before")
    @classmethod
    def _resolve_style(cls, value: Any) -> StyleType:
        return resolve_choice(value, StyleType, StyleType.POST)

    @field_validator("variants_count", mode="before")
    @classmethod
    def _clamp_variants_count(cls, value: Any) -> int:
        return clamp_variants_count(value)

    @field_validator("include_urgency", "include_social_proof", "mention_ai", mode="before")
    @classmethod
    def _resolve_flags(cls, value: Any) -> bool:
        return resolve_flag(value)

    @property
    def has_topic(self) -> bool:
        return bool(self.topic)

    class Config:
        populate_by_name = True
        validate_default = True
        json_schema_extra = {
            "example": {
                "topic": "Spring sale on handmade candles",
                "platform": "instagram",
                "tone": "friendly",
                "language": "en",
                "goal": "sales",
                "audience": "small_business",
                "style": "post",
                "variantsCount": 3,
                "includeUrgency": True,
                "includeSocialProof": True,
                "mentionAI": False
            }
        }
