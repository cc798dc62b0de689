"""Example generative client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerativeClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from app.analysis.client_base import BaseGenerativeClient


class ExampleClientAdapter(BaseGenerativeClient):
    """Example adapter that returns a fixed, fenced analysis JSON.

    No network calls. The canned answer carries the keys of every analysis
    mode so each one normalizes to a structured record.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "contentAnalysis": {
            "tone": "casual",
            "sentiment": "positive",
            "readability": "easy",
            "keyTopics": [],
            "targetAudience": "general audience",
        },
        "engagementMetrics": {"overallEngagement": "6 - example response"},
        "improvementSuggestions": {"content": ["Add a clear call to action"]},
        "bestPractices": {"dos": ["Post consistently"], "donts": ["Overuse hashtags"]},
        "sentiment": "positive",
        "engagementScore": 6,
        "topSuggestion": "Add a clear call to action",
        "hashtagSuggestion": ["#example", "#content", "#engagement"],
        "tips": [
            {
                "title": "Post consistently",
                "description": "A regular schedule keeps your audience coming back.",
                "platform": "general",
            },
        ],
    }

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE, indent=2) + "\n```"
