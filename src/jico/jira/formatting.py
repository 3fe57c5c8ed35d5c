"""Content formatting for Jira Cloud REST API v3."""

from typing import Any


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in an Atlassian Document Format document.

    API v3 rejects plain strings for rich-text fields such as description.
    The text becomes a single paragraph; no markup is interpreted. Jira
    rejects empty text nodes, so empty text gives an empty paragraph.

    Args:
        text: Plain text

    Returns:
        An ADF ``doc`` node
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}] if text else [],
            }
        ],
    }
