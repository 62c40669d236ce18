"""In-memory movie catalog loaded from the bundled JSON data file"""
import json
import logging
from dataclasses import dataclass
from decimal import Decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Movie:
    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    rating: Decimal

    @classmethod
    def from_dict(cls, data):
        """
        Build a movie from a data file entry

        Raises:
            KeyError: a field is missing
            TypeError, ValueError: a field has the wrong type
        """
        return cls(
            id=require_positive_int(data['id']),
            name=require_str(data['movieName']),
            director=require_str(data['director']),
            year=require_int(data['year']),
            genre=require_str(data['genre']),
            description=require_str(data['description']),
            duration=require_int(data['duration']),
            rating=require_rating(data['imdbRating']),
        )

    def to_dict(self):
        """Convert movie to JSON-safe format"""
        return {
            'id': self.id,
            'movieName': self.name,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration,
            'imdbRating': float(self.rating),
        }


def require_int(value):
    # bool is an int subclass, json true/false must not pass as a number
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {value!r}")
    return value


def require_str(value):
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {value!r}")
    return value


def require_positive_int(value):
    if require_int(value) <= 0:
        raise ValueError(f"expected positive integer, got {value!r}")
    return value


def require_rating(value):
    # NaN and Infinity parse as floats but have no JSON representation
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {value!r}")
    rating = Decimal(str(value))
    if not rating.is_finite():
        raise ValueError(f"expected finite number, got {value!r}")
    return rating


class MovieStore:
    """Read-only movie list plus an id lookup table"""

    def __init__(self, movies=()):
        self._movies = tuple(movies)
        self._by_id = {}

        for movie in self._movies:
            if movie.id in self._by_id:
                # Last entry wins the lookup, both stay listed
                logger.warning(f"Duplicate movie id {movie.id} in catalog: '{movie.name}' replaces "
                               f"'{self._by_id[movie.id].name}' for id lookups")
            self._by_id[movie.id] = movie

    @classmethod
    def from_json_file(cls, path):
        """
        Load the catalog from a JSON array of movie objects

        Any failure (missing file, bad JSON, bad entry) gives an empty store.
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")

            movies = [Movie.from_dict(item) for item in data]

        except (OSError, ValueError, KeyError, TypeError, ArithmeticError) as e:
            logger.error(f"Failed to load movies from {path}: {e}")
            return cls()

        logger.info(f"Loaded {len(movies)} movies from {path}")
        return cls(movies)

    def all(self):
        return list(self._movies)

    def by_id(self, movie_id):
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def __len__(self):
        return len(self._movies)
