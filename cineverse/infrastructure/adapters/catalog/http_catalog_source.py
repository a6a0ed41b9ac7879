from typing import List

import httpx
from pydantic import TypeAdapter, ValidationError

from cineverse.domain.exceptions import FetchError
from cineverse.domain.models.movie import CatalogMovie
from cineverse.domain.ports.services.catalog_source import CatalogSource
from cineverse.domain.ports.services.logger import LoggerPort

CATALOG_ADAPTER = TypeAdapter(List[CatalogMovie])


class HttpCatalogSource(CatalogSource):
    """Fetches the whole catalog from a JSON endpoint returning an array of movies"""

    def __init__(self, client: httpx.AsyncClient, url: str, logger: LoggerPort):
        self.client = client
        self.url = url
        self.logger = logger

    async def fetch_all(self) -> List[CatalogMovie]:
        try:
            response = await self.client.get(self.url)
            response.raise_for_status()
            movies = CATALOG_ADAPTER.validate_json(response.content)
        except httpx.HTTPError as e:
            raise FetchError(f"Catalog request to {self.url} failed: {e}") from e
        except ValidationError as e:
            raise FetchError(f"Catalog response from {self.url} is malformed: {e.error_count()} errors") from e

        self.logger.debug("Received %d catalog records from %s", len(movies), self.url)
        return movies
