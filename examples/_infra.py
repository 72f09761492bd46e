"""Shared infrastructure for examples."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from type_explorer.analysis import Analysis


# Sample data
NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

USER = {
    "id": 1,
    "name": "John Doe",
    "email": "john@example.com",
    "isActive": True,
    "roles": ["admin", "user"],
    "settings": {
        "theme": "dark",
        "notifications": True,
        "lastLogin": NOW,
    },
    "metadata": {
        "loginCount": 42,
        "createdAt": NOW,
        "preferences": {"language": "en", "timezone": "UTC"},
    },
}

POSTS = [
    {
        "id": 1,
        "title": "Hello World",
        "content": "This is my first post",
        "tags": ["intro", "blog"],
        "published": True,
        "createdAt": NOW,
    },
    {
        "id": 2,
        "title": "Python is Awesome",
        "content": "Let me tell you why...",
        "tags": ["python", "programming"],
        "published": False,
        "createdAt": NOW,
    },
]

SAMPLE = {"user": USER, "posts": POSTS}


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def dump(analysis: Analysis) -> str:
    return json.dumps(analysis.to_dict(), indent=2, default=str)
