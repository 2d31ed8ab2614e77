from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def make_payload(**overrides: Any) -> dict:
    payload = {
        "mainHeadline": {
            "text": "Test Headline",
            "url": "https://example.com/test",
            "image": {
                "src": "images/2024-01-15/test.jpg",
                "alt": "Test image description",
                "width": 600,
                "height": 400,
            },
        },
        "topStories": [
            {"text": "Top Story 1", "url": "https://example.com/top1"},
            {"text": "Top Story 2", "url": "https://example.com/top2"},
        ],
        "leftColumn": [],
        "centerColumn": [{"text": "Center", "url": "https://example.com/center"}],
        "rightColumn": [],
        "lastUpdated": "2024-01-15T12:00:00Z",
    }
    payload.update(overrides)
    return payload


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
