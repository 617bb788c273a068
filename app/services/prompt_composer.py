"""
Prompt composition for post generation.
Pure functions: a resolved GenerationRequest in, instruction strings out.
"""

from typing import Dict

from app.schemas.request import GenerationRequest


SYSTEM_PROMPT = (
    "You are an expert social media copywriter for small businesses. "
    "You write short, scroll-stopping marketing posts and you always answer "
    "with a single valid JSON object and nothing else."
)

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
}

GOAL_DIRECTIVES: Dict[str, str] = {
    "engagement": "Maximize engagement: invite comments, questions and shares.",
    "sales": "Drive sales: make the offer concrete and end with a clear call to buy.",
    "leads": "Generate leads: encourage the reader to sign up, book a call or send a message.",
    "awareness": "Build brand awareness: make the brand memorable and easy to recognize.",
    "traffic": "Drive traffic: give the reader a reason to click through to the website or link in bio.",
}
DEFAULT_GOAL_DIRECTIVE = "Make the post useful and compelling, with a clear next step for the reader."

AUDIENCE_DIRECTIVES: Dict[str, str] = {
    "general": "Write for a broad audience in plain, friendly language.",
    "small_business": "Write for small business owners who are short on time and care about results.",
    "young_adults": "Write for young adults: casual, energetic and trend-aware.",
    "professionals": "Write for busy professionals: concise, credible and value-focused.",
    "parents": "Write for parents: warm, practical and reassuring.",
}
DEFAULT_AUDIENCE_DIRECTIVE = "Write for the people most likely to care about this topic."

STYLE_DIRECTIVES: Dict[str, str] = {
    "post": (
        "Format each variant as a social media post: an attention-grabbing first line, "
        "a short body with line breaks, and hashtags kept separate from the caption."
    ),
    "dm": (
        "Format each variant as a personal direct message: conversational, one-to-one, "
        "no more than a few sentences, and hashtags only if they feel natural."
    ),
    "email": (
        "Format each variant as a short marketing email: the hook works as the subject line "
        "and the caption is the email body with a greeting and a sign-off."
    ),
}
DEFAULT_STYLE_DIRECTIVE = "Format each variant as a short social media post."


def get_goal_directive(goal: str) -> str:
    return GOAL_DIRECTIVES.get(goal, DEFAULT_GOAL_DIRECTIVE)


def get_audience_directive(audience: str) -> str:
    return AUDIENCE_DIRECTIVES.get(audience, DEFAULT_AUDIENCE_DIRECTIVE)


def get_style_directive(style: str) -> str:
    return STYLE_DIRECTIVES.get(style, DEFAULT_STYLE_DIRECTIVE)


def get_urgency_instruction(include_urgency: bool) -> str:
    """Get urgency instruction."""
    if include_urgency:
        return "Add a sense of urgency (limited time, limited stock or a deadline)."
    return "Do NOT create artificial urgency or mention deadlines."


def get_social_proof_instruction(include_social_proof: bool) -> str:
    """Get social proof instruction."""
    if include_social_proof:
        return "Include social proof such as happy customers, reviews or results others got."
    return "Do NOT mention testimonials, reviews or customer numbers."


def get_ai_mention_instruction(mention_ai: bool) -> str:
    """Get AI mention instruction."""
    if mention_ai:
        return "Mention that the product or service uses AI to make things easier."
    return "Do NOT mention AI or artificial intelligence."


def compose_prompt(request: GenerationRequest) -> str:
    """
    Build the user-role instruction for one generation request.

    The request must already be resolved (defaults applied, count clamped).
    """
    count = request.variants_count
    language = request.language.value
    language_name = LANGUAGE_NAMES.get(language, language)

    lines = [
        f"Write {count} different marketing post variant{'s' if count != 1 else ''} "
        f"for {request.platform.value}.",
        f"Topic: {request.topic}",
        f"Tone: {request.tone.value}",
        f"Language: write everything in {language_name} ({language}).",
        "",
        f"Goal: {get_goal_directive(request.goal.value)}",
        f"Audience: {get_audience_directive(request.audience.value)}",
        f"Format: {get_style_directive(request.style.value)}",
        "",
        f"- {get_urgency_instruction(request.include_urgency)}",
        f"- {get_social_proof_instruction(request.include_social_proof)}",
        f"- {get_ai_mention_instruction(request.mention_ai)}",
        "",
        "Return ONLY a JSON object with this exact shape, no markdown and no extra text:",
        '{ "variants": [ { "hook": string, "caption": string, "hashtags": string[] } ] }',
        f'The "variants" array must contain exactly {count} '
        f"entr{'ies' if count != 1 else 'y'}.",
        "Keep each hook under 120 characters. Hashtags are single words without spaces.",
    ]
    return "\n".join(lines)
