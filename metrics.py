from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'catalog_request_count',
    'Total Catalog Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'catalog_request_duration_seconds',
    'Catalog Request Duration',
    ['method', 'endpoint']
)


MOVIES_LOADED = Gauge(
    'catalog_movies_loaded',
    'Number of movies loaded into the catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'catalog_search_queries_total',
    'Total search queries'
)

SEARCH_VALIDATION_ERRORS = Counter(
    'catalog_search_validation_errors_total',
    'Search requests rejected by validation',
    ['reason']
)

SEARCH_RESULTS_COUNT = Histogram(
    'catalog_search_results',
    'Number of search results returned'
)


MOVIE_VIEWS = Counter(
    'catalog_movie_views_total',
    'Total movie page views',
    ['movie_id']
)


def _status_code(response):
    # Views may return (body, status) tuples
    if isinstance(response, tuple):
        if len(response) > 1 and isinstance(response[1], int):
            return response[1]
        return 200
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=f.__name__,
            http_status=_status_code(response)
        ).inc()

        duration = time.time() - start_time
        REQUEST_DURATION.labels(
            method=request.method,
            endpoint=f.__name__
        ).observe(duration)

        return response

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
