from .types import INDUSTRIES, STATES, SearchCriteria, SearchResult
from .service import search

__all__ = ["INDUSTRIES", "STATES", "SearchCriteria", "SearchResult", "search"]
