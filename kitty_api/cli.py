import argparse
import json
import logging
import os
from typing import Any, List, Optional

from logging_config import set_console_level

from .breed import Breed
from .client import KittyClient
from .config import KittyConfig
from .errors import KittyError

logger = logging.getLogger("kitty")

# every Breed property reads the raw key of the same name
BREED_FIELDS = sorted(name for name, attr in vars(Breed).items() if isinstance(attr, property))
FIELDS = BREED_FIELDS + ["image"]


def build_parser(prog: str, multi_query: bool = False) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description="TheCatAPI client")
    p.add_argument("--env-file", help="Path to a .env file (default: ./.env)")
    p.add_argument("-v", "--verbose", action="store_true", help="Show DEBUG messages on the console")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("random", help="URL of a random cat image")

    breeds = sub.add_parser("breeds", help="List breeds alphabetically")
    breeds.add_argument("--limit", type=int, default=30)

    breed = sub.add_parser("breed", help="Look a breed up by (partial) name")
    if multi_query:
        breed.add_argument("query", nargs="+")
    else:
        breed.add_argument("query")
    breed.add_argument("--field", choices=FIELDS, help="Print only this field")

    image = sub.add_parser("image", help="Image URL of a breed")
    image.add_argument("query")

    download = sub.add_parser("download", help="Download a breed image or a random one")
    target = download.add_mutually_exclusive_group(required=True)
    target.add_argument("query", nargs="?")
    target.add_argument("--random", action="store_true")
    download.add_argument("--output-dir", default="downloads")
    download.add_argument("-o", "--output", help="File path (default: <output-dir>/<image name>)")
    return p


def make_config(args: argparse.Namespace) -> KittyConfig:
    return KittyConfig.from_env(args.env_file)


def apply_verbosity(args: argparse.Namespace) -> None:
    if args.verbose:
        set_console_level(logging.DEBUG)


def output_path(args: argparse.Namespace, url: str) -> str:
    if args.output:
        return args.output
    return os.path.join(args.output_dir, os.path.basename(url))


def project(client: KittyClient, breed: Breed, field: Optional[str]) -> Any:
    if field is None:
        return breed.to_dict()
    if field == "image":
        return client.breed_image_url(breed)
    return breed.get(field)


def render(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, ensure_ascii=False)
    return str(value)


def run(client: KittyClient, args: argparse.Namespace) -> Any:
    if args.command == "random":
        return client.random_image()
    if args.command == "breeds":
        return [b.to_dict() for b in client.cat_breeds(args.limit)]
    if args.command == "breed":
        return project(client, client.cat_breed(args.query), args.field)
    if args.command == "image":
        return client.cat_breed_image(args.query)
    if args.command == "download":
        url = client.random_image() if args.random else client.cat_breed_image(args.query)
        return client.download_image(url, output_path(args, url))
    raise ValueError(f"unknown command {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser("python -m kitty_api").parse_args(argv)
    apply_verbosity(args)
    try:
        logger.info(f"Program started ({args.command})")
        client = KittyClient(make_config(args))
        print(render(run(client, args)))
        logger.info("Program finished successfully")
        return 0
    except (KittyError, ValueError) as e:
        logger.error(f"Program failed with error: {e}")
        return 1
