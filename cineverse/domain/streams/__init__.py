from cineverse.domain.streams.operators import combine_latest, debounce, distinct_until_changed, first, map_stream
from cineverse.domain.streams.state_stream import StateStream

__all__ = ["StateStream", "combine_latest", "debounce", "distinct_until_changed", "first", "map_stream"]
