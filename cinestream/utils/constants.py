"""
Constantes globales pour CineStream.

Ce module contient toutes les constantes utilisées dans l'application:
- URLs de l'API TMDB, du CDN d'images et de l'intégration vidéo
- Correspondance nom de catégorie -> endpoint TMDB
- Clés du stockage local
- Libellés de l'interface
"""

# API TMDB v3
TMDB_BASE_URL = "https://api.themoviedb.org/3"

# CDN d'images TMDB et image de remplacement
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/500x750?text=No+Image"
PLACEHOLDER_PROFILE_URL = "https://via.placeholder.com/185x185?text=No+Image"
DEFAULT_IMAGE_SIZE = "w500"
IMAGE_SIZES = frozenset({"w92", "w185", "w300", "w500", "original"})

# Bandes-annonces
VIDEO_SITE = "YouTube"
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{key}?autoplay=1&rel=0"

# Catégories -> endpoints (les formes camelCase viennent des anciens liens)
CATEGORY_ENDPOINTS = {
    "trending": "/trending/movie/week",
    "popular": "/movie/popular",
    "top_rated": "/movie/top_rated",
    "topRated": "/movie/top_rated",
    "now_playing": "/movie/now_playing",
    "nowPlaying": "/movie/now_playing",
    "upcoming": "/movie/upcoming",
}
DEFAULT_CATEGORY = "popular"

# Stockage local
WATCHLIST_KEY = "cinestream-watchlist"
THEME_KEY = "cinestream-theme"
THEMES = ("dark", "light")
DEFAULT_THEME = "dark"

# Présentation
TOP_RATED_THRESHOLD = 8.0
TRENDING_BADGE_COUNT = 3
SEARCH_RESULTS_LIMIT = 10
CAST_LIMIT = 10
RANDOM_TRAILER_CANDIDATES = 3

# Libellés
HERO_FALLBACK_TITLE = "Unlimited movies, TV shows, and more"
NO_DESCRIPTION = "No description available."
NO_OVERVIEW = "No overview available."
NO_RESULTS_MESSAGE = "No movies found. Try a different search."
SEARCH_ERROR_MESSAGE = "Error searching movies. Please try again."
EMPTY_WATCHLIST_MESSAGE = "Your watchlist is empty. Add movies by clicking the bookmark icon!"
CLEAR_WATCHLIST_CONFIRM = "Are you sure you want to clear your entire watchlist?"
NO_TRAILER_LABEL = "No Trailer Available"
