"""Pipeline stages: compatibility filter, ranking (scoring policies + badges), orchestration."""

from .compatibility import blocking_criteria, filter_compatible, is_compatible
from .orchestrator import recommend_for_context, recommend_offerings, top_recommendations
from .ranking import get_policy, rank

__all__ = [
    "blocking_criteria",
    "filter_compatible",
    "is_compatible",
    "get_policy",
    "rank",
    "recommend_for_context",
    "recommend_offerings",
    "top_recommendations",
]
