"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for list, search, details,
credits and videos endpoints. These fixtures are used with respx to mock
httpx calls in tests.
"""


def _movie(movie_id: int, title: str, vote_average: float = 7.0, **extra) -> dict:
    movie = {
        "adult": False,
        "backdrop_path": f"/backdrop{movie_id}.jpg",
        "genre_ids": [28, 878],
        "id": movie_id,
        "original_language": "en",
        "original_title": title,
        "overview": f"Overview of {title}.",
        "popularity": 100.0,
        "poster_path": f"/poster{movie_id}.jpg",
        "release_date": "2010-07-15",
        "title": title,
        "video": False,
        "vote_average": vote_average,
        "vote_count": 1000,
    }
    movie.update(extra)
    return movie


# GET /movie/popular?page=1 - 20 results, more than the homepage keeps
TMDB_LIST_RESPONSE = {
    "page": 1,
    "results": [_movie(1000 + i, f"Popular {i}") for i in range(20)],
    "total_pages": 500,
    "total_results": 10000,
}

# GET /trending/movie/week?page=1
TMDB_TRENDING_RESPONSE = {
    "page": 1,
    "results": [
        _movie(27205, "Inception", 8.4),
        _movie(155, "The Dark Knight", 8.5),
        _movie(19995, "Avatar", 7.6),
        _movie(603, "The Matrix", 8.2),
    ],
    "total_pages": 1000,
    "total_results": 20000,
}

# GET /trending/movie/week?page=2
TMDB_TRENDING_PAGE_2_RESPONSE = {
    "page": 2,
    "results": [_movie(680, "Pulp Fiction", 8.5), _movie(13, "Forrest Gump", 8.5)],
    "total_pages": 1000,
    "total_results": 20000,
}

# GET /search/movie?query=Avatar
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        _movie(19995, "Avatar", 7.6, release_date="2009-12-15"),
        _movie(76600, "Avatar: The Way of Water", 7.7, release_date="2022-12-14"),
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /movie/27205
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
        {"id": 12, "name": "Adventure"},
    ],
    "id": 27205,
    "imdb_id": "tt1375666",
    "original_title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    "release_date": "2010-07-15",
    "runtime": 148,
    "title": "Inception",
    "vote_average": 8.4,
    "vote_count": 35000,
}

# GET /movie/27205/credits
TMDB_MOVIE_CREDITS_RESPONSE = {
    "id": 27205,
    "cast": [
        {
            "id": 6193,
            "name": "Leonardo DiCaprio",
            "character": "Dom Cobb",
            "profile_path": "/wo2hJpn04vbtmh0B9utCFdsQhxM.jpg",
        },
        {
            "id": 24045,
            "name": "Joseph Gordon-Levitt",
            "character": "Arthur",
            "profile_path": None,
        },
    ],
    "crew": [{"id": 525, "name": "Christopher Nolan", "job": "Director"}],
}

# GET /movie/27205/videos - a Teaser precedes the Trailer
TMDB_MOVIE_VIDEOS_RESPONSE = {
    "id": 27205,
    "results": [
        {"key": "vimeo123", "site": "Vimeo", "type": "Trailer", "name": "Vimeo trailer"},
        {"key": "teaser01", "site": "YouTube", "type": "Teaser", "name": "Teaser"},
        {"key": "YoHD9XEInc0", "site": "YouTube", "type": "Trailer", "name": "Official Trailer"},
    ],
}

# GET /genre/movie/list
TMDB_GENRES_RESPONSE = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 27, "name": "Horror"},
    ]
}
