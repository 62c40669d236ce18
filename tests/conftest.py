import os
import sys
from decimal import Decimal

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from database.movies_db import Movie, MovieStore
from database.reviews_db import Review, ReviewStore


def make_movie(movie_id, name, genre, **overrides):
    fields = {
        'id': movie_id,
        'name': name,
        'director': 'Test Director',
        'year': 2000,
        'genre': genre,
        'description': f'Description of {name}',
        'duration': 120,
        'rating': Decimal('4.5'),
    }
    fields.update(overrides)
    return Movie(**fields)


@pytest.fixture
def movies():
    return [
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Family Boss', 'Crime/Drama'),
        make_movie(3, 'Dream Heist', 'Action/Sci-Fi'),
        make_movie(4, 'Space Voyage', 'Adventure/Sci-Fi'),
        make_movie(5, 'Other Side', 'drama'),
    ]


@pytest.fixture
def store(movies):
    return MovieStore(movies)


@pytest.fixture
def reviews():
    return ReviewStore([
        Review(movie_id=1, reviewer='Alice', rating=Decimal('9.5'), comment='Loved it'),
        Review(movie_id=1, reviewer='Ben', rating=Decimal('8'), comment='Great ending'),
    ])


@pytest.fixture
def client(store, reviews):
    app = create_app(store=store, reviews=reviews)
    app.config['TESTING'] = True
    return app.test_client()
