"""
Atlassian Document Format (ADF) utilities.

Jira Cloud's v3 API expects rich-text fields such as ``description`` as an
ADF document rather than a plain string.
"""

from typing import Any

DEFAULT_DESCRIPTION = "No description provided"


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in a single-paragraph ADF document.

    Args:
        text: The text to wrap

    Returns:
        ADF document with one paragraph holding one text node
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {
                        "type": "text",
                        "text": text,
                    }
                ],
            }
        ],
    }
