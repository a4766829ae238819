"""
Noteful Backend: Cascade Coordinator Unit Tests
================================================

What we test:
    ✅ Operations run concurrently, each in its own session/transaction
    ✅ Results come back in argument order
    ✅ One failure: the other operation still completes and commits,
       the failure is raised after both finish
    ✅ Several failures: the first in argument order is raised
"""

import asyncio

import pytest

from noteful.services.cascade import run_concurrently


class StorageBoom(Exception):
    pass


class TestRunConcurrently:

    @pytest.mark.asyncio
    async def test_results_in_argument_order(self, fake_session_factory):
        async def first(session):
            await asyncio.sleep(0.01)
            return "first"

        async def second(session):
            return "second"

        results = await run_concurrently(fake_session_factory, first, second)

        assert results == ["first", "second"]
        assert len(fake_session_factory.sessions) == 2
        assert all(s.committed for s in fake_session_factory.sessions)
        assert all(s.closed for s in fake_session_factory.sessions)

    @pytest.mark.asyncio
    async def test_each_operation_gets_its_own_session(self, fake_session_factory):
        seen = []

        async def record(session):
            seen.append(session)

        await run_concurrently(fake_session_factory, record, record)

        assert len(seen) == 2
        assert seen[0] is not seen[1]

    @pytest.mark.asyncio
    async def test_operations_overlap(self, fake_session_factory):
        # Each side waits for the other to start; sequential execution
        # would never get past the first wait.
        a_started = asyncio.Event()
        b_started = asyncio.Event()

        async def op_a(session):
            a_started.set()
            await b_started.wait()

        async def op_b(session):
            b_started.set()
            await a_started.wait()

        await asyncio.wait_for(run_concurrently(fake_session_factory, op_a, op_b), timeout=1)

    @pytest.mark.asyncio
    async def test_failure_does_not_cancel_the_other(self, fake_session_factory):
        finished = []

        async def failing(session):
            raise StorageBoom("delete failed")

        async def slow(session):
            await asyncio.sleep(0.02)
            finished.append("slow")

        with pytest.raises(StorageBoom, match="delete failed"):
            await run_concurrently(fake_session_factory, failing, slow)

        assert finished == ["slow"]
        failed_session, ok_session = fake_session_factory.sessions
        assert failed_session.rolled_back is True
        assert failed_session.committed is False
        # No compensation: the successful half stays committed
        assert ok_session.committed is True

    @pytest.mark.asyncio
    async def test_first_failure_in_argument_order_wins(self, fake_session_factory):
        async def slow_fail(session):
            await asyncio.sleep(0.02)
            raise StorageBoom("first")

        async def fast_fail(session):
            raise ValueError("second")

        with pytest.raises(StorageBoom, match="first"):
            await run_concurrently(fake_session_factory, slow_fail, fast_fail)
