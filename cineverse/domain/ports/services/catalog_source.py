from abc import ABC, abstractmethod
from typing import List

from cineverse.domain.models.movie import CatalogMovie


class CatalogSource(ABC):
    @abstractmethod
    async def fetch_all(self) -> List[CatalogMovie]:
        """Full, unpaginated catalog in source order"""
        pass
