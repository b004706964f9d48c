"""End-to-end expiration scenarios on a real event loop.

Periods are scaled down to fractions of a second.
"""

import asyncio
import time

import pytest

from ant_cache import AntCache

CHECK_PERIOD = 0.1
TTL = 0.2


class TestExpirationScenarios:
    """Test expiration driven by the background sweeper."""

    @pytest.mark.asyncio
    async def test_lapsed_entry_is_deleted(self):
        """Test an entry is gone after its TTL with no listener."""
        async with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.set("k", "v")
            await asyncio.sleep(TTL * 3)

            assert cache.get("k") is None
            assert not cache.has("k")

    @pytest.mark.asyncio
    async def test_lapsed_entry_kept_without_auto_delete(self):
        """Test delete_on_expire=False keeps the original value."""
        config = {"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL, "delete_on_expire": False}
        async with AntCache(config) as cache:
            cache.set("k", "v")
            await asyncio.sleep(TTL * 3)

            assert cache.get("k") == "v"

    @pytest.mark.asyncio
    async def test_zero_ttl_is_exempt(self):
        """Test an explicit zero TTL outlives the default TTL."""
        async with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.set("k", "v", 0)
            cache.set("other", "v")
            await asyncio.sleep(TTL * 3)

            assert cache.get("k") == "v"
            assert not cache.has("other")

    @pytest.mark.asyncio
    async def test_vetoed_entry_is_reported_each_tick(self):
        """Test a listener that keeps the entry sees it again on later ticks."""
        reported = []
        async with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.on("expired", lambda entry: reported.append(entry.key))
            cache.set("k", "v")
            await asyncio.sleep(TTL + CHECK_PERIOD * 4)

            assert cache.get("k") == "v"
            assert reported.count("k") >= 2

    @pytest.mark.asyncio
    async def test_listener_deletes_entry(self):
        """Test a listener using the capability removes the entry once."""
        reported = []

        def on_expired(entry):
            reported.append(entry.key)
            entry.delete_current_key()

        async with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.on("expired", on_expired)
            cache.set("k", "v")
            await asyncio.sleep(TTL + CHECK_PERIOD * 4)

            assert not cache.has("k")
            assert reported == ["k"]

    @pytest.mark.asyncio
    async def test_disabled_sweeper_is_plain_map(self):
        """Test check period 0 never expires anything."""
        async with AntCache({"check_period_seconds": 0, "ttl_seconds": 0.01}) as cache:
            cache.set("k", "v")
            await asyncio.sleep(0.2)

            assert cache.get("k") == "v"

    @pytest.mark.asyncio
    async def test_dispose_stops_expiry(self):
        """Test no entry expires once the cache is disposed."""
        cache = AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": 0.01})
        cache.set("k", "v")
        cache.dispose()

        await asyncio.sleep(CHECK_PERIOD * 3)

        assert cache.get("k") == "v"


class TestSynchronousExpiration:
    """Test expiration for caches used outside an event loop."""

    def test_lapsed_entry_is_deleted(self):
        """Test an entry is gone after its TTL in plain synchronous code."""
        with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.set("k", "v")
            cache.set("forever", "v", 0)
            time.sleep(TTL * 2.5)

            assert cache.get("k") is None
            assert cache.keys() == ["forever"]

    def test_lapsed_entry_kept_without_auto_delete(self):
        """Test delete_on_expire=False keeps the value in synchronous code."""
        config = {"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL, "delete_on_expire": False}
        with AntCache(config) as cache:
            cache.set("k", "v")
            time.sleep(TTL * 2.5)

            assert cache.get("k") == "v"

    def test_listener_deletes_entry(self):
        """Test the expired listener runs inline on the next access."""
        reported = []

        def on_expired(entry):
            reported.append(entry.key)
            entry.delete_current_key()

        with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": TTL}) as cache:
            cache.on("expired", on_expired)
            cache.set("k", "v")
            time.sleep(TTL * 2.5)

            assert not cache.has("k")
            assert reported == ["k"]

    def test_fresh_entry_survives(self):
        """Test an entry within its TTL is still served."""
        with AntCache({"check_period_seconds": CHECK_PERIOD, "ttl_seconds": 5}) as cache:
            cache.set("k", "v")
            time.sleep(CHECK_PERIOD * 2)

            assert cache.get("k") == "v"
