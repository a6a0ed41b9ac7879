from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from cineverse.domain.exceptions import PageLoadError
from cineverse.domain.models.movie import Movie


class PagingConfig(BaseModel):
    page_size: int = Field(default=10, gt=0)
    prefetch_distance: int = Field(default=3, ge=0)
    initial_key: int = Field(default=0, ge=0)


class MoviePage(BaseModel):
    """Contiguous slice of a movie list plus the keys of its neighbours"""

    key: int
    data: List[Movie]
    prev_key: Optional[int] = None
    next_key: Optional[int] = None


class PagingState(BaseModel):
    """Pages currently held by a consumer and the position it last looked at"""

    pages: List[MoviePage] = Field(default_factory=list)
    anchor_position: Optional[int] = None
    page_size: int = Field(default=10, gt=0)

    def closest_page_to_position(self, position: int) -> Optional[MoviePage]:
        if not self.pages:
            return None
        key = position // self.page_size
        for page in self.pages:
            if page.key == key:
                return page
        if key < self.pages[0].key:
            return self.pages[0]
        return self.pages[-1]


class PagingData(BaseModel):
    """One emission of a paging session"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    pages: List[MoviePage] = Field(default_factory=list)
    page_size: int = Field(default=10, gt=0)
    error: Optional[PageLoadError] = None

    @property
    def items(self) -> List[Movie]:
        return [movie for page in self.pages for movie in page.data]

    @property
    def offset(self) -> int:
        """Absolute list position of the first loaded item"""
        return self.pages[0].key * self.page_size if self.pages else 0
