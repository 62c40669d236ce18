from .catalog_check import check_catalog
from .movie_icons import get_movie_icon
from .movie_search import SearchEngine

__all__ = [
    'check_catalog',
    'get_movie_icon',
    'SearchEngine'
]
