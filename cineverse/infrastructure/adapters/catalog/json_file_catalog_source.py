import asyncio
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from cineverse.domain.exceptions import FetchError
from cineverse.domain.models.movie import CatalogMovie
from cineverse.domain.ports.services.catalog_source import CatalogSource
from cineverse.infrastructure.adapters.catalog.http_catalog_source import CATALOG_ADAPTER


class JsonFileCatalogSource(CatalogSource):
    """Bundled catalog: the same JSON array the HTTP endpoint serves, read from disk"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def fetch_all(self) -> List[CatalogMovie]:
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
            return CATALOG_ADAPTER.validate_json(raw)
        except OSError as e:
            raise FetchError(f"Could not read catalog file {self.path}: {e}") from e
        except ValidationError as e:
            raise FetchError(f"Catalog file {self.path} is malformed: {e.error_count()} errors") from e
