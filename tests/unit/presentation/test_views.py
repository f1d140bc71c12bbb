"""
Tests unitaires pour les constructeurs de vues.

Les vues sont des fonctions pures: on verifie les regles d'affichage
(badges, troncatures, messages de repli) sans passer par le web.
"""

import pytest

from cinestream.core.entities.movie import Category
from cinestream.presentation.views import (
    build_category_row,
    build_category_rows,
    build_hero,
    build_home,
    build_movie_card,
    build_movie_modal,
    build_search_results,
    build_watchlist,
    filter_rows,
    watchlist_notification,
)
from cinestream.utils.constants import (
    EMPTY_WATCHLIST_MESSAGE,
    HERO_FALLBACK_TITLE,
    NO_DESCRIPTION,
    NO_OVERVIEW,
    NO_RESULTS_MESSAGE,
    NO_TRAILER_LABEL,
    PLACEHOLDER_IMAGE_URL,
    PLACEHOLDER_PROFILE_URL,
)
from tests.fixtures.tmdb_responses import (
    TMDB_LIST_RESPONSE,
    TMDB_MOVIE_CREDITS_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_MOVIE_VIDEOS_RESPONSE,
    TMDB_SEARCH_RESPONSE,
)


@pytest.fixture
def inception_detail() -> dict:
    return {
        **TMDB_MOVIE_DETAILS_RESPONSE,
        "credits": TMDB_MOVIE_CREDITS_RESPONSE,
        "videos": TMDB_MOVIE_VIDEOS_RESPONSE,
    }


class TestMovieCard:
    """Tests pour build_movie_card()."""

    def test_basic_fields(self, inception) -> None:
        card = build_movie_card(inception)

        assert card.id == 27205
        assert card.title == "Inception"
        assert card.poster_url == "https://image.tmdb.org/t/p/w500/poster27205.jpg"
        assert card.rating == "8.4"
        assert card.overview == "Overview of Inception."

    def test_top_rated_badge_from_eight(self) -> None:
        assert build_movie_card({"id": 1, "vote_average": 8.0}).top_rated is True
        assert build_movie_card({"id": 1, "vote_average": 7.9}).top_rated is False

    def test_trending_rank_for_first_three_only(self) -> None:
        ranks = [build_movie_card({"id": i}, "trending", i).trending_rank for i in range(4)]

        assert ranks == [1, 2, 3, None]

    def test_no_rank_outside_trending(self) -> None:
        assert build_movie_card({"id": 1}, "popular", 0).trending_rank is None

    def test_missing_fields_fallbacks(self) -> None:
        card = build_movie_card({"id": 1})

        assert card.title == "Untitled"
        assert card.poster_url == PLACEHOLDER_IMAGE_URL
        assert card.rating == "N/A"
        assert card.overview == NO_DESCRIPTION

    def test_long_overview_is_truncated(self) -> None:
        card = build_movie_card({"id": 1, "overview": "x" * 200})

        assert card.overview == "x" * 120 + "..."


class TestCategoryRows:
    def test_row_marks_watchlisted_movies(self) -> None:
        category = Category("popular", "Popular on CineStream", [{"id": 1}, {"id": 2}])

        row = build_category_row(category, watchlist_ids=["2"])

        assert [card.in_watchlist for card in row.cards] == [False, True]
        assert row.name == "Popular on CineStream"

    def test_offset_past_badge_count_has_no_rank(self) -> None:
        category = Category("trending", "Trending Now", [{"id": 9}])

        row = build_category_row(category, offset=10)

        assert row.cards[0].trending_rank is None

    def test_empty_categories_are_hidden(self, homepage_categories) -> None:
        """Une categorie en echec (vide) n'a pas de rangee."""
        rows = build_category_rows(homepage_categories)

        assert [row.id for row in rows] == ["trending", "popular", "now_playing", "upcoming"]

    def test_filter_rows(self, homepage_categories) -> None:
        rows = build_category_rows(homepage_categories)

        assert filter_rows(rows, "all") == rows
        assert [row.id for row in filter_rows(rows, "upcoming")] == ["upcoming"]
        assert filter_rows(rows, "top_rated") == ()


class TestSearchResults:
    """Tests pour build_search_results()."""

    def test_items(self) -> None:
        view = build_search_results(TMDB_SEARCH_RESPONSE["results"])

        assert view.message is None
        first = view.items[0]
        assert first.title == "Avatar"
        assert first.year == "2009"
        assert first.rating == "7.6"
        assert first.poster_url == "https://image.tmdb.org/t/p/w92/poster19995.jpg"

    def test_at_most_ten_items(self) -> None:
        view = build_search_results(TMDB_LIST_RESPONSE["results"])

        assert len(view.items) == 10

    @pytest.mark.parametrize("movies", [None, []])
    def test_empty_gives_message(self, movies) -> None:
        view = build_search_results(movies)

        assert view.items == ()
        assert view.message == NO_RESULTS_MESSAGE

    def test_missing_release_date_gives_na(self) -> None:
        view = build_search_results([{"id": 1, "title": "X", "release_date": ""}])

        assert view.items[0].year == "N/A"


class TestMovieModal:
    """Tests pour build_movie_modal()."""

    def test_detail_fields(self, inception_detail) -> None:
        modal = build_movie_modal(inception_detail)

        assert modal.title == "Inception"
        assert modal.release == "July 15, 2010"
        assert modal.runtime == "2h 28m"
        assert modal.rating == "8.4"
        assert modal.genres == "Action, Science Fiction, Adventure"
        assert modal.votes == "35,000 votes"

    def test_trailer_url_uses_first_youtube_trailer(self, inception_detail) -> None:
        modal = build_movie_modal(inception_detail)

        assert modal.trailer_url == "https://www.youtube.com/embed/YoHD9XEInc0?autoplay=1&rel=0"
        assert modal.trailer_label == "Play Trailer"

    def test_no_trailer(self, inception_detail) -> None:
        inception_detail["videos"] = {"results": []}

        modal = build_movie_modal(inception_detail)

        assert modal.trailer_url is None
        assert modal.trailer_label == NO_TRAILER_LABEL

    def test_cast_truncation_and_placeholder(self, inception_detail) -> None:
        modal = build_movie_modal(inception_detail)

        leo, joseph = modal.cast
        assert leo.name == "Leonardo DiCapr..."
        assert leo.character == "Dom Cobb"
        assert leo.profile_url.startswith("https://image.tmdb.org/t/p/w185/")
        assert joseph.profile_url == PLACEHOLDER_PROFILE_URL

    def test_cast_limited_to_ten(self, inception_detail) -> None:
        inception_detail["credits"] = {
            "cast": [{"name": f"Actor {i}", "character": "Role"} for i in range(15)]
        }

        assert len(build_movie_modal(inception_detail).cast) == 10

    def test_missing_optional_fields(self) -> None:
        modal = build_movie_modal({"id": 1})

        assert modal.overview == NO_OVERVIEW
        assert modal.runtime == "N/A"
        assert modal.release == "N/A"
        assert modal.genres == ""
        assert modal.cast == ()
        assert modal.votes == ""

    @pytest.mark.parametrize(
        "in_watchlist,label",
        [(True, "Remove from Watchlist"), (False, "Add to Watchlist")],
    )
    def test_watchlist_label(self, inception_detail, in_watchlist, label) -> None:
        assert build_movie_modal(inception_detail, in_watchlist).watchlist_label == label


class TestWatchlistView:
    def test_empty_message(self) -> None:
        view = build_watchlist([])

        assert view.cards == ()
        assert view.message == EMPTY_WATCHLIST_MESSAGE

    def test_cards(self) -> None:
        view = build_watchlist(
            [{"id": 1, "title": "A very long movie title indeed", "poster_path": "/p.jpg", "vote_average": 7.5}]
        )

        card = view.cards[0]
        assert card.title == "A very long movie ti..."
        assert card.poster_url == "https://image.tmdb.org/t/p/w300/p.jpg"
        assert card.rating == "7.5"
        assert view.message is None


class TestHomeView:
    def test_hero_prefers_backdrop(self, inception) -> None:
        hero = build_hero(inception)

        assert hero.backdrop_url == "https://image.tmdb.org/t/p/original/backdrop27205.jpg"
        assert hero.movie_id == 27205

    def test_hero_fallbacks(self) -> None:
        hero = build_hero({"id": 1, "poster_path": "/p.jpg"})

        assert hero.title == HERO_FALLBACK_TITLE
        assert hero.backdrop_url.endswith("/original/p.jpg")
        assert build_hero(None) is None

    def test_build_home(self, homepage_categories, inception) -> None:
        home = build_home(homepage_categories, inception, [{"id": 27205, "title": "Inception"}], "light", 1)

        assert home.hero.title == "Inception"
        assert home.theme == "light"
        assert home.next_page == 2
        assert home.errors == ("Top Rated",)
        assert home.rows[0].cards[0].in_watchlist is True
        assert len(home.watchlist.cards) == 1


@pytest.mark.parametrize(
    "added,message",
    [(True, "Added to watchlist!"), (False, "Removed from watchlist!"), (None, "Watchlist cleared!")],
)
def test_watchlist_notification(added, message) -> None:
    assert watchlist_notification(added) == message
