"""Built-in example tasks offered on the start screen."""

from typing import Dict, List

EXAMPLE_PROMPTS: List[Dict[str, str]] = [
    {
        "label": "🍝 Find top-rated Italian restaurants in NYC with outdoor seating",
        "prompt": "Find me the best-rated Italian restaurants in New York City with outdoor seating",
    },
    {
        "label": "📱 Compare latest iPhone models and features",
        "prompt": "Research and compare the latest iPhone models and their key features",
    },
    {
        "label": "✈️ Search for London to Tokyo flight deals",
        "prompt": "Find the best deals on round-trip flights from London to Tokyo for next month",
    },
    {
        "label": "🌱 Explore recent renewable energy innovations",
        "prompt": "Research and summarize recent breakthroughs in renewable energy technology",
    },
]
