#!/usr/bin/env python3

import logging

import anyio
import click

from mincache import CacheOptions, ExpirySweeper, MinCache

logger = logging.getLogger(__name__)


@click.command()
@click.option("--max-size-kb", default=5 * 1024, type=int, help="Max cache size in KB (0 disables eviction)")
@click.option("--ttl-ms", default=30000, type=int, help="Default TTL for items in milliseconds")
@click.option("--del-expired-ms", default=60000, type=int, help="Interval for the expiry sweeper in milliseconds")
@click.option("--debug/--no-debug", default=True, help="Log internal cache events")
@click.option(
    "--log-level",
    default="DEBUG",
    help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.option("--sweep-seconds", default=0.0, type=float, help="Run the expiry sweeper for this long before exiting")
def main(max_size_kb: int, ttl_ms: int, del_expired_ms: int, debug: bool, log_level: str, sweep_seconds: float) -> int:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = CacheOptions(
        max_size_kb=max_size_kb,
        ttl_ms=ttl_ms,
        del_expired_ms=del_expired_ms,
        debug=debug,
    )
    cache: MinCache = MinCache("myCache", options)

    # Add an item with a 10s TTL
    cache.set("key", {"foo": "bar"}, 10000)
    click.echo(f"get: {cache.get('key')}")
    click.echo(f"exists: {cache.exists('key')}")
    click.echo(f"ttl: {cache.ttl('key')}s")

    cache.delete("key")
    click.echo(f"keys after delete: {cache.keys()}")

    for i in range(12):
        cache.set(f"userid{i}", {"id": i, "name": f"user {i}"})
    cache.set("session", "abc")
    click.echo(f"get_all: {len(cache.get_all())} items")

    # exactly 20 seconds from now
    cache.set_ttl("session", 20000)
    click.echo(f"renamed: {cache.rename('session', 'session:old')}")

    click.echo(f"scan all: {cache.scan('userid*')}")
    click.echo(f"scan first 10: {cache.scan('userid*', 10)}")
    click.echo(f"size: {cache.size()} bytes")

    if sweep_seconds > 0:

        async def sweep() -> None:
            sweeper = ExpirySweeper(cache)
            async with anyio.create_task_group() as tg:
                await tg.start(sweeper.run)
                await anyio.sleep(sweep_seconds)
                sweeper.stop()
                tg.cancel_scope.cancel()
            logger.info("Sweeper ran %d passes", sweeper.sweeps)

        anyio.run(sweep)

    click.echo(f"metrics: {cache.metrics.snapshot()}")
    return 0


if __name__ == "__main__":
    main()
