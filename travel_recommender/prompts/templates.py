"""
Prompt template and structured-output schema for recommendation requests.
"""

import re

from google.genai import types

RECOMMENDATION_PROMPT = """
Based on the following user profile (text and images), generate 3 personalized travel recommendations for a trip to {city}.
The user's text description is: "{profile}". The images provide additional context about their hobbies and interests. Analyze everything to create a holistic profile.

For each recommendation, provide:
1. A suitable title (e.g., "Hike the Coastal Trail").
2. A one-paragraph explanation of why this recommendation fits the user's profile, referencing both text and image content if applicable.
3. A suggested activity at that location.

Format the output as a JSON object with a single key "recommendations", which is an array of objects. Each object in the array should have three properties: "title", "explanation", and "activity".
"""

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

RECOMMENDATION_FIELDS = ("title", "explanation", "activity")

RECOMMENDATION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "recommendations": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    name: types.Schema(type=types.Type.STRING)
                    for name in RECOMMENDATION_FIELDS
                },
                required=list(RECOMMENDATION_FIELDS),
            ),
        )
    },
    required=["recommendations"],
)


def render_template(template: str, **kwargs: str) -> str:
    """Render a template string in one pass, leaving unresolved vars as-is."""
    return _PLACEHOLDER.sub(
        lambda match: kwargs.get(match.group(1), match.group(0)), template
    )


def build_recommendation_prompt(city: str, profile: str) -> str:
    """Interpolate city and profile text verbatim into the fixed prompt."""
    return render_template(RECOMMENDATION_PROMPT, city=city, profile=profile)
