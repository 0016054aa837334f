"""
Nutrition lookup router.

Proxies free-text food queries to the nutrition API and returns its
response unchanged.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_nutrition_service
from application.exceptions import InvalidArgument, UpstreamFailure
from application.ports import NutritionService

router = APIRouter(
    tags=["Nutrition"],
)


@router.get("/foodinfo")
async def food_info(
    query: Optional[str] = Query(None, description='Food description, e.g. "100g apple"'),
    nutrition: Optional[NutritionService] = Depends(get_nutrition_service),
):
    """
    Look up nutrition facts.

    Returns:
        The upstream JSON array
    """
    if not query or not query.strip():
        raise InvalidArgument("query is required, e.g. 100g apple")
    if nutrition is None:
        raise UpstreamFailure("NINJAS_API_KEY not set")
    return await nutrition.lookup(query.strip())
