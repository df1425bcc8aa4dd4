"""
Example 1: Gated data directory

Click the data directory entry on a surface whose broker has not granted
access yet, then let the broker answer from its own thread.
"""
import asyncio

from privgate import InMemoryBroker, PrivgateSettings
from privgate.runtime.permission import LoopDispatcher
from privgate.surface import build_surface


async def main():
    """Run one request/grant round trip on the event loop."""

    settings = PrivgateSettings(scripts_dir="./scripts")
    broker = InMemoryBroker(reachable=True, granted=False)

    surface = build_surface(
        broker,
        display=lambda message: print(f"[toast] {message}"),
        settings=settings,
        dispatcher=LoopDispatcher(),
    )

    with surface:
        entry = surface.entry(settings.data_dir_key)
        print(f"{entry.display_label}: {entry.summary}")

        run = surface.click(settings.data_dir_key)
        print(f"Waiting for broker, token={run.token}")

        # The broker answers on a thread of its own
        broker.deliver_in_thread(run.token, granted=True)
        while not run.done:
            await asyncio.sleep(0.05)

        print(f"{entry.display_label}: {entry.summary}")


if __name__ == "__main__":
    asyncio.run(main())
