from __future__ import annotations

from _infra import Replica, banner, run

from deferrables import in_parallel, join_first_success
from kungfu import Error, Ok


async def main() -> None:
    banner("02_replicas_first_success: fastest healthy replica, then a full report")

    replicas = [
        Replica(name="replica-a", latency=0.01, outages=1),
        Replica(name="replica-b", latency=0.03),
        Replica(name="replica-c", latency=0.02),
    ]

    reads = [r.read("config") for r in replicas]

    first = await join_first_success(*reads)
    match first:
        case Ok(value):
            print(f"first success: {value}")
        case Error(err):
            print(f"error: {err!r}")

    # Same reads: report waits for the rest, in completion order
    report = await in_parallel(*reads)
    match report:
        case Ok((successes, failures)):
            print(f"ok: {successes}")
            print(f"down: {[str(f) for f in failures]}")
        case Error(err):
            print(f"error: {err!r}")

    for r in replicas:
        print(f"{r.name}: {r.attempts} attempt(s) {r.log}")


if __name__ == "__main__":
    run(main)
