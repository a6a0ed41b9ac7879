from typing import AbstractSet, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogMovie(BaseModel):
    """Raw catalog record, as delivered by a catalog source."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    poster_url: str = ""
    backdrop_url: str = ""
    rating: float = 0.0
    release_date: str = ""
    duration: str = ""
    synopsis: str = ""
    director: str = ""
    cast: Tuple[str, ...] = Field(default_factory=tuple)
    genres: Tuple[str, ...] = Field(default_factory=tuple)

    def annotate(self, favorite_ids: AbstractSet[str]) -> "Movie":
        return Movie(**self.model_dump(exclude={"is_favorite"}), is_favorite=self.id in favorite_ids)


class Movie(CatalogMovie):
    """Catalog record merged with the current favorites snapshot."""

    is_favorite: bool = False

    @property
    def release_year(self) -> str:
        return self.release_date[:4]
