"""Movie reviews loaded from the bundled JSON data file"""
import json
import logging
from dataclasses import dataclass
from decimal import Decimal

from database.movies_db import require_positive_int, require_rating, require_str

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    movie_id: int
    reviewer: str
    rating: Decimal
    comment: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            movie_id=require_positive_int(data['movieId']),
            reviewer=require_str(data['reviewer']),
            rating=require_rating(data['rating']),
            comment=require_str(data['comment']),
        )

    def to_dict(self):
        return {
            'movieId': self.movie_id,
            'reviewer': self.reviewer,
            'rating': float(self.rating),
            'comment': self.comment,
        }


class ReviewStore:

    def __init__(self, reviews=()):
        self._by_movie = {}
        for review in reviews:
            self._by_movie.setdefault(review.movie_id, []).append(review)

    @classmethod
    def from_json_file(cls, path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")

            reviews = [Review.from_dict(item) for item in data]

        except (OSError, ValueError, KeyError, TypeError, ArithmeticError) as e:
            logger.error(f"Failed to load reviews from {path}: {e}")
            return cls()

        logger.info(f"Loaded {len(reviews)} reviews from {path}")
        return cls(reviews)

    def for_movie(self, movie_id):
        """Reviews for a movie in file order, empty list when it has none"""
        return list(self._by_movie.get(movie_id, []))
