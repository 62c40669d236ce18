"""
Search over the movie catalog

SearchEngine works with any store exposing all() and by_id(), so handlers
and tests can hand it a MovieStore built from whatever records they need.
"""
import logging

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_GENRE_LENGTH = 50


class SearchValidationError(ValueError):
    """Search parameters rejected before searching"""

    reason = 'invalid'
    default_message = 'Invalid search parameters.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self):
        return self.args[0]


class InvalidId(SearchValidationError):
    reason = 'invalid_id'
    default_message = 'Movie ID must be a positive number.'


class MissingCriteria(SearchValidationError):
    reason = 'missing_criteria'
    default_message = 'Please provide at least one search parameter: name, id or genre.'


class NameTooLong(SearchValidationError):
    reason = 'name_too_long'
    default_message = f'Movie name must be at most {MAX_NAME_LENGTH} characters.'


class GenreTooLong(SearchValidationError):
    reason = 'genre_too_long'
    default_message = f'Genre must be at most {MAX_GENRE_LENGTH} characters.'


def is_blank(value):
    return value is None or not value.strip()


def has_valid_id(movie_id):
    return movie_id is not None and movie_id > 0


class SearchEngine:

    def __init__(self, store):
        self.store = store

    def search(self, name=None, movie_id=None, genre=None):
        """
        Find movies matching the criteria

        A positive id wins over everything else and returns at most one
        movie. Otherwise name and genre narrow the catalog as
        case-insensitive substring matches. Blank values are ignored, so
        all-blank criteria return the whole catalog; call validate() first
        for user input.

        Returns:
            list: matching movies in catalog order
        """
        logger.info(f"Searching movies: name={name!r}, id={movie_id!r}, genre={genre!r}")

        if has_valid_id(movie_id):
            movie = self.store.by_id(movie_id)
            return [movie] if movie is not None else []

        results = self.store.all()

        if not is_blank(name):
            needle = name.strip().lower()
            results = [movie for movie in results if needle in movie.name.lower()]

        if not is_blank(genre):
            needle = genre.strip().lower()
            results = [movie for movie in results if needle in movie.genre.lower()]

        logger.info(f"Search returned {len(results)} movies")
        return results

    def genres(self):
        """Distinct genres in the catalog, sorted"""
        return sorted({movie.genre for movie in self.store.all()})

    def validate(self, name=None, movie_id=None, genre=None):
        """
        Check search parameters coming from a request

        Raises:
            InvalidId, MissingCriteria, NameTooLong, GenreTooLong
        """
        if movie_id is not None and movie_id <= 0:
            raise InvalidId()

        if is_blank(name) and not has_valid_id(movie_id) and is_blank(genre):
            raise MissingCriteria()

        if not is_blank(name) and len(name.strip()) > MAX_NAME_LENGTH:
            raise NameTooLong()

        if not is_blank(genre) and len(genre.strip()) > MAX_GENRE_LENGTH:
            raise GenreTooLong()
