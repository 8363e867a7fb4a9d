"""
Purpose:
- The single prompt template sent alongside the image.
"""

from __future__ import annotations

CAPTION_COUNT = 5

PROMPT_TEMPLATE = (
    "Generate {count} short, catchy and creative quotes for the following image, "
    "tailored for a {platform} post. The quotes should be inspiring, witty, or thought-provoking. "
    "Return the output as a JSON array of strings. "
    'For example: ["This is the first quote.", "This is the second quote."]. '
    "Do not include any other text or markdown formatting in your response, only the JSON array."
)

def build_prompt(platform: str) -> str:
    return PROMPT_TEMPLATE.format(count=CAPTION_COUNT, platform=platform)
