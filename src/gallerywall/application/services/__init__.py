"""Application services for layout recommendation.

- RecommenderService: runs a generator and frames its output as messages
- RecommenderWorker: runs RecommenderService requests on a background thread
"""

from .recommender import MAX_FORWARDED_SOLUTIONS, RecommenderService
from .worker import RecommenderWorker

__all__ = [
    "MAX_FORWARDED_SOLUTIONS",
    "RecommenderService",
    "RecommenderWorker",
]
