import asyncio

from kungfu import Error, LazyCoroResult, Ok, Result

from deferrables import (
    AsyncioReactor,
    Deferred,
    SchedulePolicy,
    failed,
    from_lazy_coro_result,
    from_result,
    in_parallel,
    join_first_success,
    lift,
    loop_until_failure,
    loop_until_success,
    succeeded,
    to_lazy_coro_result,
)

from fakes import error_value, ok_value


def after(seconds: float, result: Result[object, object]) -> LazyCoroResult[object, object]:
    async def run() -> Result[object, object]:
        await asyncio.sleep(seconds)
        return result

    return LazyCoroResult(run)


# ============================================================================
# Lift helpers
# ============================================================================


def test_succeeded_failed_from_result() -> None:
    assert ok_value(succeeded(1).outcome) == 1
    assert error_value(failed("e").outcome) == "e"
    assert ok_value(from_result(Ok(2)).outcome) == 2
    assert error_value(lift.from_result(Error(3)).outcome) == 3


def test_from_lazy_coro_result_completes_later() -> None:
    async def run() -> None:
        d = from_lazy_coro_result(after(0, Ok("x")))

        assert d.is_pending
        assert ok_value(await d) == "x"

    asyncio.run(run())


def test_from_lazy_coro_result_raising_coroutine_fails() -> None:
    async def explode() -> Result[int, str]:
        raise LookupError("gone")

    async def run() -> None:
        result = await from_lazy_coro_result(explode)

        assert isinstance(error_value(result), LookupError)

    asyncio.run(run())


def test_to_lazy_coro_result_yields_outcome() -> None:
    async def run() -> None:
        d: Deferred[int, str] = Deferred()
        asyncio.get_running_loop().call_soon(d.succeed, 5)

        result = await to_lazy_coro_result(d)

        assert ok_value(result) == 5

    asyncio.run(run())


# ============================================================================
# Combinators on the asyncio loop
# ============================================================================


def test_in_parallel_orders_by_completion_time() -> None:
    async def run() -> None:
        slow = from_lazy_coro_result(after(0.05, Ok("slow")))
        fast = from_lazy_coro_result(after(0, Ok("fast")))
        broken = from_lazy_coro_result(after(0.01, Error("broken")))

        result = await in_parallel(slow, fast, broken)

        assert ok_value(result) == (["fast", "slow"], ["broken"])

    asyncio.run(run())


def test_join_first_success_picks_fastest_success() -> None:
    async def run() -> None:
        result = await join_first_success(
            from_lazy_coro_result(after(0.05, Ok("slow"))),
            from_lazy_coro_result(after(0, Error("quick failure"))),
            from_lazy_coro_result(after(0.01, Ok("fast"))),
        )

        assert ok_value(result) == "fast"

    asyncio.run(run())


def test_loop_uses_next_tick_when_loop_running() -> None:
    async def run() -> None:
        outcomes = iter([Error("a"), Error("b"), Ok(7)])
        calls = 0

        def attempt() -> Deferred[object, object]:
            nonlocal calls
            calls += 1
            return from_lazy_coro_result(after(0, next(outcomes)))

        loop = loop_until_success(attempt)
        assert loop.is_pending
        assert calls == 0

        assert ok_value(await loop) == 7
        assert calls == 3

    asyncio.run(run())


def test_loop_with_synchronous_attempts_still_completes_asynchronously() -> None:
    async def run() -> None:
        loop = loop_until_failure(lambda: failed("done"))

        assert loop.is_pending
        assert error_value(await loop) == "done"

    asyncio.run(run())


def test_bound_reactor_schedules_on_given_loop() -> None:
    async def run() -> None:
        reactor = AsyncioReactor(asyncio.get_running_loop())
        values = iter(range(10))

        def attempt() -> Deferred[int, int]:
            value = next(values)
            return succeeded(value) if value < 3 else failed(value)

        loop = loop_until_failure(
            attempt,
            policy=SchedulePolicy.next_tick(reactor),
        )

        assert error_value(await loop) == 3
        assert loop.successes == [0, 1, 2]

    asyncio.run(run())


def test_reactor_outside_loop_is_not_running() -> None:
    assert not AsyncioReactor().is_running()
