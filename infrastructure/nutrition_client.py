"""
HTTP client for the API Ninjas nutrition endpoint.

The response body is passed through to the caller unchanged; this client
only adds the API key header and maps transport and HTTP errors to
UpstreamFailure.
"""

import logging
from typing import Any, Dict, List

import httpx

from application.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

DEFAULT_NUTRITION_URL = "https://api.api-ninjas.com/v1/nutrition"
FETCH_ERROR_MESSAGE = "Error fetching food info"


class NinjasNutritionClient:
    """
    Async nutrition lookup client.

    A new httpx.AsyncClient is opened per request; lookups are infrequent
    and this keeps the client free of connection state.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_NUTRITION_URL,
        timeout: float = 10.0,
    ):
        """
        Initialize the nutrition client.

        Args:
            api_key: API Ninjas key sent as X-Api-Key
            base_url: Nutrition endpoint URL
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    async def lookup(self, query: str) -> List[Dict[str, Any]]:
        """
        Fetch nutrition facts for a free-text query such as "100g apple".

        Raises:
            UpstreamFailure: If the service is unreachable, times out, or
                answers with a non-2xx status or a non-JSON body, or the
                transport fails in any other way
        """
        headers = {"X-Api-Key": self._api_key}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    self._base_url,
                    params={"query": query},
                    headers=headers,
                )

                if response.status_code != 200:
                    logger.error(
                        f"Nutrition API error: {response.status_code} - {response.text}"
                    )
                    raise UpstreamFailure(FETCH_ERROR_MESSAGE)

                return response.json()

        except httpx.ConnectError as e:
            logger.error(f"Nutrition API unavailable: {e}")
            raise UpstreamFailure(FETCH_ERROR_MESSAGE) from e
        except httpx.TimeoutException as e:
            logger.error(f"Nutrition API timeout: {e}")
            raise UpstreamFailure(FETCH_ERROR_MESSAGE) from e
        except ValueError as e:
            logger.error(f"Nutrition API returned invalid JSON: {e}")
            raise UpstreamFailure(FETCH_ERROR_MESSAGE) from e
        except httpx.HTTPError as e:
            logger.error(f"Nutrition API request failed: {e}")
            raise UpstreamFailure(FETCH_ERROR_MESSAGE) from e
