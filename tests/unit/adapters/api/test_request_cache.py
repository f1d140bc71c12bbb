"""
Tests unitaires pour RequestCache.

Ces tests verifient:
- Un seul appel reseau par (endpoint, params) dans la fenetre de fraicheur
- Une entree perimee est traitee comme absente
- Les echecs ne sont pas mis en cache et remontent tels quels
- La cle ne depend pas de l'ordre des parametres
"""

import pytest

from cinestream.adapters.api.cache import RequestCache, make_cache_key
from cinestream.core.ports.api_clients import FetchError


class FakeClock:
    """Horloge manuelle pour avancer le temps dans les tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingFetch:
    """Coroutine de fetch qui compte ses appels."""

    def __init__(self, payload=None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else {"results": []}
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> RequestCache:
    return RequestCache(ttl=300, clock=clock)


class TestMakeCacheKey:
    """Tests pour la construction des cles."""

    def test_key_is_independent_of_param_order(self) -> None:
        """L'ordre des parametres ne change pas la cle."""
        first = make_cache_key("/search/movie", {"query": "Avatar", "page": 1})
        second = make_cache_key("/search/movie", {"page": 1, "query": "Avatar"})
        assert first == second

    def test_key_distinguishes_endpoints_and_values(self) -> None:
        assert make_cache_key("/movie/popular", {"page": 1}) != make_cache_key(
            "/movie/upcoming", {"page": 1}
        )
        assert make_cache_key("/movie/popular", {"page": 1}) != make_cache_key(
            "/movie/popular", {"page": 2}
        )

    def test_missing_params_equal_empty_params(self) -> None:
        assert make_cache_key("/genre/movie/list") == make_cache_key("/genre/movie/list", {})


class TestRequestCache:
    """Tests pour la classe RequestCache."""

    def test_default_ttl_is_five_minutes(self) -> None:
        """DEFAULT_TTL est de 5 minutes (300 secondes)."""
        assert RequestCache.DEFAULT_TTL == 300
        assert RequestCache().ttl == 300

    @pytest.mark.asyncio
    async def test_two_calls_within_window_fetch_once(self, cache: RequestCache, clock: FakeClock) -> None:
        """Deux appels dans la fenetre -> un seul appel reseau."""
        fetch = CountingFetch({"results": [{"id": 1}]})

        first = await cache.get_or_fetch("/movie/popular", {"page": 1}, fetch)
        clock.advance(299)
        second = await cache.get_or_fetch("/movie/popular", {"page": 1}, fetch)

        assert fetch.calls == 1
        assert first == second == {"results": [{"id": 1}]}

    @pytest.mark.asyncio
    async def test_call_after_window_fetches_again(self, cache: RequestCache, clock: FakeClock) -> None:
        """Un appel apres 5 minutes repart sur le reseau."""
        fetch = CountingFetch()

        await cache.get_or_fetch("/movie/popular", {"page": 1}, fetch)
        clock.advance(300)
        await cache.get_or_fetch("/movie/popular", {"page": 1}, fetch)

        assert fetch.calls == 2

    @pytest.mark.asyncio
    async def test_stale_entry_is_refreshed(self, cache: RequestCache, clock: FakeClock) -> None:
        """Apres rafraichissement, la nouvelle valeur est servie pour 5 minutes."""
        await cache.get_or_fetch("/movie/popular", None, CountingFetch({"v": 1}))
        clock.advance(301)
        refreshed = await cache.get_or_fetch("/movie/popular", None, CountingFetch({"v": 2}))
        clock.advance(100)
        again = await cache.get_or_fetch("/movie/popular", None, CountingFetch({"v": 3}))

        assert refreshed == {"v": 2}
        assert again == {"v": 2}

    @pytest.mark.asyncio
    async def test_param_order_hits_same_entry(self, cache: RequestCache) -> None:
        fetch = CountingFetch()

        await cache.get_or_fetch("/search/movie", {"query": "x", "page": 1}, fetch)
        await cache.get_or_fetch("/search/movie", {"page": 1, "query": "x"}, fetch)

        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_failure_is_not_cached_and_propagates(self, cache: RequestCache) -> None:
        """Un echec remonte et n'est pas memorise."""
        failing = CountingFetch(error=FetchError("/movie/popular", 500))

        with pytest.raises(FetchError):
            await cache.get_or_fetch("/movie/popular", {"page": 1}, failing)

        assert len(cache) == 0
        succeeding = CountingFetch({"results": []})
        await cache.get_or_fetch("/movie/popular", {"page": 1}, succeeding)
        assert succeeding.calls == 1

    @pytest.mark.asyncio
    async def test_failure_after_stale_entry_keeps_no_payload(
        self, cache: RequestCache, clock: FakeClock
    ) -> None:
        """Une entree perimee n'est jamais servie, meme si le rafraichissement echoue."""
        await cache.get_or_fetch("/movie/popular", None, CountingFetch({"v": 1}))
        clock.advance(600)

        with pytest.raises(FetchError):
            await cache.get_or_fetch(
                "/movie/popular", None, CountingFetch(error=FetchError("/movie/popular"))
            )
        assert cache.get("/movie/popular") is None

    def test_get_and_set(self, cache: RequestCache, clock: FakeClock) -> None:
        cache.set("/genre/movie/list", None, {"genres": []})
        assert cache.get("/genre/movie/list") == {"genres": []}
        clock.advance(300)
        assert cache.get("/genre/movie/list") is None

    def test_clear_removes_all_entries(self, cache: RequestCache) -> None:
        """clear() supprime toutes les entrees du cache."""
        cache.set("/a", None, 1)
        cache.set("/b", None, 2)

        cache.clear()

        assert len(cache) == 0
        assert cache.get("/a") is None
