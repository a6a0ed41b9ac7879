from typing import Optional


class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass


class FetchError(DomainError):
    """Catalog retrieval or parsing failed. The previous cache is left untouched."""


class PageLoadError(DomainError):
    """A single page load failed. Pages loaded earlier stay valid."""

    def __init__(self, page_key: Optional[int], message: str):
        super().__init__(message)
        self.page_key = page_key
