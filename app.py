from flask import Flask, Blueprint, current_app, jsonify, redirect, render_template, request, url_for
from flask_cors import CORS
from config import Config
import logging

from services.catalog_check import check_catalog
from services.movie_icons import get_movie_icon
from services.movie_search import SearchEngine, SearchValidationError, InvalidId, is_blank

from database.movies_db import MovieStore
from database.reviews_db import ReviewStore

from metrics import (
    metrics_endpoint, track_request,
    MOVIES_LOADED, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    SEARCH_VALIDATION_ERRORS, MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


movies_bp = Blueprint('movies', __name__)


def get_search_engine():
    return current_app.extensions['search_engine']


def get_review_store():
    return current_app.extensions['review_store']


def parse_movie_id(raw_id):
    """Movie ids are plain ASCII digit strings"""
    raw_id = raw_id.strip()
    if not (raw_id.isascii() and raw_id.isdecimal()):
        raise ValueError(f"not a movie id: {raw_id!r}")
    return int(raw_id)


def parse_search_id(raw_id):
    """Blank id means no id; anything else must be a number"""
    if is_blank(raw_id):
        return None
    try:
        return parse_movie_id(raw_id)
    except ValueError:
        raise InvalidId() from None


def search_args():
    return (
        request.args.get('name'),
        request.args.get('id'),
        request.args.get('genre')
    )


def results_message(count):
    if count == 0:
        return 'No movies found matching your search. Try different keywords.'
    return f"Found {count} movie{'' if count == 1 else 's'} matching your search."


def run_search(engine, name, raw_id, genre):
    """Validate request parameters, then search"""
    SEARCH_QUERY_COUNT.inc()

    try:
        movie_id = parse_search_id(raw_id)
        engine.validate(name, movie_id, genre)
    except SearchValidationError as e:
        SEARCH_VALIDATION_ERRORS.labels(reason=e.reason).inc()
        raise

    movies = engine.search(name, movie_id, genre)
    SEARCH_RESULTS_COUNT.observe(len(movies))
    return movie_id, movies


@movies_bp.route('/')
def home():
    return redirect(url_for('movies.movies_list'))


@movies_bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'version': '1.0.0'
    }), 200


@movies_bp.route('/check/catalog')
def check_catalog_endpoint():
    result = check_catalog(get_search_engine().store, current_app.config['MOVIES_DATA_FILE'])
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@movies_bp.route('/movies')
@track_request
def movies_list():
    engine = get_search_engine()
    name, raw_id, genre = search_args()

    logger.info(f"Fetching movies with search parameters: name={name!r}, id={raw_id!r}, genre={genre!r}")

    context = {'search_performed': False}

    if is_blank(name) and is_blank(raw_id) and is_blank(genre):
        movies = engine.store.all()
    else:
        context['search_performed'] = True
        try:
            movie_id, movies = run_search(engine, name, raw_id, genre)
        except SearchValidationError as e:
            logger.warning(f"Invalid search parameters: {e.message}")
            movies = engine.store.all()
            context['search_error'] = e.message
        else:
            context.update(
                search_name=name,
                search_id=movie_id,
                search_genre=genre,
                search_result_count=len(movies),
                search_message=results_message(len(movies))
            )

    return render_template(
        'movies.html',
        movies=movies,
        all_genres=engine.genres(),
        **context
    )


@movies_bp.route('/movies/search')
@track_request
def search_api():
    name, raw_id, genre = search_args()

    logger.info(f"API search request: name={name!r}, id={raw_id!r}, genre={genre!r}")

    try:
        movie_id, movies = run_search(get_search_engine(), name, raw_id, genre)

        return jsonify({
            'success': True,
            'message': results_message(len(movies)),
            'count': len(movies),
            'movies': [movie.to_dict() for movie in movies],
            'searchCriteria': {
                'name': name if name is not None else '',
                'id': movie_id if movie_id is not None else '',
                'genre': genre if genre is not None else ''
            }
        }), 200

    except SearchValidationError as e:
        logger.warning(f"Invalid search parameters for API: {e.message}")
        return jsonify({
            'success': False,
            'error': e.message,
            'count': 0,
            'movies': []
        }), 400

    except Exception:
        logger.exception("Unexpected error during movie search")
        return jsonify({
            'success': False,
            'error': 'Something went wrong while searching. Please try again later.',
            'count': 0,
            'movies': []
        }), 500


@movies_bp.route('/movies/<movie_id>/details')
@track_request
def movie_detail(movie_id):
    logger.info(f"Fetching details for movie id {movie_id!r}")

    try:
        movie = get_search_engine().store.by_id(parse_movie_id(movie_id))
    except ValueError:
        movie = None

    if movie is None:
        logger.warning(f"Movie with id {movie_id!r} not found")
        return render_template(
            'error.html',
            title='Movie Not Found',
            message=f'Movie with ID {movie_id} was not found in the catalog.'
        ), 404

    MOVIE_VIEWS.labels(movie_id=movie.id).inc()

    return render_template(
        'movie_detail.html',
        movie=movie,
        movie_icon=get_movie_icon(movie.name),
        reviews=get_review_store().for_movie(movie.id)
    )


@movies_bp.route('/metrics')
def metrics():
    return metrics_endpoint()


def create_app(store=None, reviews=None):
    """
    Build the Flask app

    Stores default to the bundled data files named in the configuration.
    """
    app = Flask(__name__)
    app.config.from_object(Config)

    if store is None:
        store = MovieStore.from_json_file(app.config['MOVIES_DATA_FILE'])
    if reviews is None:
        reviews = ReviewStore.from_json_file(app.config['REVIEWS_DATA_FILE'])

    app.extensions['search_engine'] = SearchEngine(store)
    app.extensions['review_store'] = reviews
    MOVIES_LOADED.set(len(store))

    CORS(app, resources={r'/movies/search': {'origins': app.config['CORS_ORIGINS']}})
    app.register_blueprint(movies_bp)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
