# Strategy module
from .errors import NoResultsError, ProviderError, StrategyError, TopicValidationError
from .models import StrategyDocument, TopicRequest, VideoCandidate, VideoInsight
from .pipeline import StrategyPipeline
from .service import analyze_topic
