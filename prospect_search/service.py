import logging
from typing import List, Optional

from . import gemini
from .config import Settings, get_settings
from .exceptions import ExtractionError, MissingCriteriaError
from .extract import extract_results
from .prompts import build_prompt
from .types import SearchCriteria, SearchResult

logger = logging.getLogger(__name__)


def search(criteria: SearchCriteria, settings: Optional[Settings] = None) -> List[SearchResult]:
    """
    Run one prospect search: prompt -> Gemini -> validated records.
    Any failure surfaces as an EntitySearchError with a user-facing message.
    """
    if not criteria.is_complete():
        raise MissingCriteriaError()

    settings = settings or get_settings()
    prompt = build_prompt(criteria)

    logger.info(
        "Searching industry=%r state=%r model=%s",
        criteria.industry,
        criteria.state,
        settings.gemini_model,
    )
    text = gemini.generate_content(
        prompt,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        api_url=settings.gemini_api_url,
        timeout_s=settings.request_timeout_s,
    )

    try:
        results = extract_results(text)
    except ExtractionError as e:
        logger.error("Could not extract results (%s) from %d chars of model output", e, len(text))
        raise

    logger.info("Search returned %d results", len(results))
    return results
