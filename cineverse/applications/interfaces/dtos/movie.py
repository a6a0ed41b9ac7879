from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from cineverse.domain.models.movie import Movie


class MoviePublic(BaseModel):
    id: str
    title: str
    poster_url: str
    backdrop_url: str
    rating: float
    release_date: str
    duration: str
    synopsis: str
    director: str
    cast: List[str]
    genres: List[str]
    is_favorite: bool
    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, movie: Movie) -> "MoviePublic":
        return cls.model_validate(movie)


class MovieList(BaseModel):
    movies: list[MoviePublic]


class MoviePagePublic(BaseModel):
    page: int
    prev_page: Optional[int]
    next_page: Optional[int]
    movies: list[MoviePublic]
