"""
Request boundary: validate a topic payload, run the pipeline and map the
outcome to a status code and JSON body.
"""
import logging

from pydantic import ValidationError

from .errors import NoResultsError, TopicValidationError
from .models import TopicRequest
from .pipeline import StrategyPipeline
from .youtube_search import SearchProvider

logger = logging.getLogger(__name__)

TOPIC_REQUIRED_MESSAGE = "Topic is required"
NO_RESULTS_MESSAGE = "No videos found for the provided topic."
INVALID_REQUEST_MESSAGE = "Invalid request"
FAILURE_MESSAGE = "Failed to analyze topic. Please try again later."


def parse_request(payload) -> TopicRequest:
    """Validate an inbound payload.

    Raises:
        TopicValidationError: topic missing, not a string, or blank, or
            another field has the wrong type.
    """
    try:
        return TopicRequest.model_validate(payload)
    except ValidationError as e:
        if any(error["loc"] == ("topic",) for error in e.errors()):
            raise TopicValidationError(TOPIC_REQUIRED_MESSAGE) from e
        raise TopicValidationError(INVALID_REQUEST_MESSAGE) from e


async def analyze_topic(payload, provider: SearchProvider) -> tuple[int, dict]:
    """Handle one analyze request end to end.

    Returns:
        (status_code, body): 200 with the strategy document, or
        400/404/500 with {"error": message}.
    """
    try:
        request = parse_request(payload)
    except TopicValidationError as e:
        logger.info("Rejected request: %s", e)
        return e.status_code, {"error": str(e)}

    try:
        document = await StrategyPipeline(provider).run(request)
    except NoResultsError as e:
        logger.info("No results for topic '%s'", request.topic)
        return e.status_code, {"error": NO_RESULTS_MESSAGE}
    except Exception:
        logger.exception("Failed to analyze topic '%s'", request.topic)
        return 500, {"error": FAILURE_MESSAGE}

    return 200, document.to_dict()
