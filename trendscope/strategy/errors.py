"""
Error taxonomy for the strategy pipeline.

Each error carries the status class the request boundary reports it as.
"""


class StrategyError(Exception):
    """Base class for all pipeline errors."""
    status_code = 500


class TopicValidationError(StrategyError):
    """Topic missing or empty after trimming."""
    status_code = 400


class NoResultsError(StrategyError):
    """The provider returned no usable videos for a topic."""
    status_code = 404

    def __init__(self, topic: str):
        super().__init__(f"No videos found for topic: {topic}")
        self.topic = topic


class ProviderError(StrategyError):
    """The external video-search provider failed."""
    status_code = 500

    def __init__(self, query: str, message: str):
        super().__init__(f"Search failed for '{query}': {message}")
        self.query = query
