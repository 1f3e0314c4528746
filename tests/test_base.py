import typing

from deferrables import Base, CancelledError, Deferred

from fakes import error_value, ok_value


class AfterTwo(Base[int, typing.Any, int, str]):
    """Finishes with the number of outcomes once two attempts have completed."""

    def __init__(self) -> None:
        super().__init__()
        self.finish_calls = 0

    def _is_done(self) -> bool:
        return len(self._successes) + len(self._failures) >= 2

    def _finish(self) -> None:
        self.finish_calls += 1
        self.succeed(len(self._successes) + len(self._failures))


def test_register_attempt_returns_op() -> None:
    acc = AfterTwo()
    op: Deferred[int, str] = Deferred()

    assert acc.register_attempt(op) is op
    assert acc.attempts == 1


def test_outcomes_recorded_in_completion_order() -> None:
    acc = AfterTwo()
    first: Deferred[int, str] = Deferred()
    second: Deferred[int, str] = Deferred()
    third: Deferred[int, str] = Deferred()
    for op in (first, second, third):
        acc.register_attempt(op)

    third.succeed(3)
    first.fail("one")
    second.succeed(2)

    assert acc.successes == [3, 2]
    assert acc.failures == ["one"]


def test_snapshots_are_copies() -> None:
    acc = AfterTwo()
    acc.register_attempt(Deferred()).succeed(1)  # type: ignore[union-attr]

    acc.successes.append(99)

    assert acc.successes == [1]


def test_finish_runs_once_and_later_outcomes_still_recorded() -> None:
    acc = AfterTwo()
    ops: list[Deferred[int, str]] = [Deferred() for _ in range(4)]
    for op in ops:
        acc.register_attempt(op)

    ops[0].succeed(1)
    ops[1].fail("x")
    ops[2].succeed(3)
    ops[3].fail("y")

    assert acc.finish_calls == 1
    assert ok_value(acc.outcome) == 2
    assert acc.successes == [1, 3]
    assert acc.failures == ["x", "y"]


def test_cancel_fails_with_cancelled_error() -> None:
    acc = AfterTwo()
    acc.register_attempt(Deferred())

    acc.cancel()

    error = error_value(acc.outcome)
    assert isinstance(error, CancelledError)
    assert error.attempts == 1


def test_cancel_with_custom_error() -> None:
    acc = AfterTwo()

    acc.cancel("stop")

    assert error_value(acc.outcome) == "stop"


def test_cancel_after_completion_is_noop() -> None:
    acc = AfterTwo()
    acc.register_attempt(Deferred()).succeed(1)  # type: ignore[union-attr]
    acc.register_attempt(Deferred()).succeed(2)  # type: ignore[union-attr]

    acc.cancel()

    assert ok_value(acc.outcome) == 2


def test_policy_satisfied_after_cancel_skips_finish() -> None:
    acc = AfterTwo()
    ops: list[Deferred[int, str]] = [Deferred(), Deferred()]
    for op in ops:
        acc.register_attempt(op)
    acc.cancel()

    ops[0].succeed(1)
    ops[1].succeed(2)

    assert acc.finish_calls == 0
    assert acc.successes == [1, 2]
    assert isinstance(error_value(acc.outcome), CancelledError)
