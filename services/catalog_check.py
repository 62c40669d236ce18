import os

from config import Config


def check_catalog(store, data_file=None):
    try:
        movie_count = len(store)
        movies = store.all()
        genres = sorted({movie.genre for movie in movies})
        data_file = data_file or Config.MOVIES_DATA_FILE

        if movie_count == 0:
            return {
                'status': 'unhealthy',
                'service': 'catalog',
                'message': 'Catalog is empty, movie data failed to load',
                'details': {
                    'data_file': data_file,
                    'data_file_exists': os.path.exists(data_file)
                }
            }

        years = [movie.year for movie in movies]

        return {
            'status': 'healthy',
            'service': 'catalog',
            'message': f'Catalog loaded with {movie_count} movies',
            'details': {
                'data_file': data_file,
                'movies': movie_count,
                'genres': len(genres),
                'oldest_year': min(years),
                'newest_year': max(years)
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
