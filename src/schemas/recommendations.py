from typing import Any, List

from schemas.base import CamelSchema


class RecommendationsResponseSchema(CamelSchema):
    results: List[dict[str, Any]]
