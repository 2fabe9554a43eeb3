import argparse
import asyncio
import logging
from typing import Any, List, Optional

from kitty_api.cli import apply_verbosity, build_parser, make_config, output_path, project, render
from kitty_api.errors import KittyError

from .async_client import AsyncKittyClient

logger = logging.getLogger("kitty")


async def lookup_many(client: AsyncKittyClient, queries: List[str], field: Optional[str]) -> Any:
    """Look several breeds up at once; the first failure is raised."""
    breeds = await asyncio.gather(*(client.cat_breed(q) for q in queries))
    results = [project(client, b, field) for b in breeds]
    return results[0] if len(results) == 1 else results


async def run(client: AsyncKittyClient, args: argparse.Namespace) -> Any:
    if args.command == "random":
        return await client.random_image()
    if args.command == "breeds":
        return [b.to_dict() for b in await client.cat_breeds(args.limit)]
    if args.command == "breed":
        return await lookup_many(client, args.query, args.field)
    if args.command == "image":
        return await client.cat_breed_image(args.query)
    if args.command == "download":
        url = await client.random_image() if args.random else await client.cat_breed_image(args.query)
        return await client.download_image(url, output_path(args, url))
    raise ValueError(f"unknown command {args.command}")


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser("python -m async_kitty_api", multi_query=True).parse_args(argv)
    apply_verbosity(args)
    try:
        logger.info(f"Program started ({args.command}, async)")
        client = AsyncKittyClient(make_config(args))
        print(render(await run(client, args)))
        logger.info("Program finished successfully")
        return 0
    except (KittyError, ValueError) as e:
        logger.error(f"Program failed with error: {e}")
        return 1
