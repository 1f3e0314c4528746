from __future__ import annotations

from _infra import Replica, banner, run

from deferrables import loop_until_success
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: loop_until_success over a flaky replica")

    replica = Replica(name="primary", latency=0.01, outages=2)

    # Next attempt is requested only after the previous one failed
    reads = loop_until_success(lambda: replica.read("config"))

    result = await reads
    match result:
        case Ok(value):
            print(f"read {value} after {replica.attempts} attempts: {replica.log}")
            print(f"failures seen: {[str(f) for f in reads.failures]}")
        case Error(err):
            print(f"factory broke: {err!r}")


if __name__ == "__main__":
    run(main)
