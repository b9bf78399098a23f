"""
Live schema handle.

The schema is built once at startup from SDL (local files and/or services
exposing their SDL over HTTP) and then shared by reference between requests.
Nothing mutates it after ``set_schema``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional

import httpx
from graphql import GraphQLError, GraphQLSchema, build_schema

from .errors import SchemaError

logger = logging.getLogger(__name__)


SDL_ENDPOINT = "/__schema.graphql"

_schema: GraphQLSchema | None = None


def load_sdl_files(paths: Iterable[Path | str]) -> list[str]:
    """Read SDL documents from files."""
    return [Path(p).read_text() for p in paths]


async def _fetch_sdl(client: httpx.AsyncClient, url: str) -> Optional[str]:
    """Fetch SDL from a single service."""
    try:
        response = await client.get(f"{url.rstrip('/')}{SDL_ENDPOINT}", timeout=10.0)
    except httpx.HTTPError as e:
        logger.warning(f"Could not fetch schema from {url}: {e}")
        return None
    if response.status_code != 200:
        logger.warning(f"{url} returned {response.status_code} for {SDL_ENDPOINT}")
        return None
    return response.text


async def fetch_remote_sdl(
    urls: Iterable[str],
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """
    Fetch SDL documents from services.

    Unreachable services are skipped: their types are simply absent from the
    schema until the next rebuild.
    """
    urls = list(urls)
    if not urls:
        return []

    if client is None:
        async with httpx.AsyncClient() as own_client:
            results = await asyncio.gather(*(_fetch_sdl(own_client, url) for url in urls))
    else:
        results = await asyncio.gather(*(_fetch_sdl(client, url) for url in urls))

    return [sdl for sdl in results if sdl]


def build_live_schema(sdl_sources: Iterable[str]) -> GraphQLSchema:
    """Build the schema from SDL documents. Raises SchemaError if they do not parse."""
    document = "\n\n".join(sdl_sources)
    if not document.strip():
        raise SchemaError("No SDL sources provided")
    try:
        schema = build_schema(document)
    except (GraphQLError, TypeError) as e:
        raise SchemaError(f"Could not build schema: {e}") from e
    logger.info(f"Built live schema with {len(schema.type_map)} types")
    return schema


async def load_live_schema(
    paths: Iterable[Path | str] = (),
    urls: Iterable[str] = (),
    client: httpx.AsyncClient | None = None,
) -> GraphQLSchema:
    """Build the schema from SDL files and remote services."""
    sources = load_sdl_files(paths)
    sources.extend(await fetch_remote_sdl(urls, client=client))
    return build_live_schema(sources)


def set_schema(schema: GraphQLSchema):
    """Set the process-wide live schema."""
    global _schema
    _schema = schema


def get_schema() -> GraphQLSchema:
    """Get the live schema."""
    if _schema is None:
        raise RuntimeError("Schema not initialized. Call set_schema() first.")
    return _schema
