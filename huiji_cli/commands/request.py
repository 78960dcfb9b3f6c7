"""
CLI Request Commands

Send a single get / post / query request and print the JSON result.

Usage:
    huiji query list=allpages aplimit=10
    huiji get action=parse page="Main Page" prop=text prop=categories
    huiji post action=purge titles=Foo forcelinkupdate
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from argparse import Namespace
from typing import Any, Sequence

from huiji.config import ClientConfig
from huiji.http import HttpClient
from huiji.schemas import MediaWikiApiException, ParameterValidationException
from huiji_cli import EXIT_API_ERROR, EXIT_RUNTIME_ERROR, EXIT_SUCCESS


logger = logging.getLogger(__name__)


def parse_pairs(pairs: Sequence[str]) -> dict[str, Any]:
    """
    Parse ``KEY=VALUE`` arguments into a parameter mapping.

    A repeated key collects its values into a list; a bare ``KEY`` is the
    boolean flag ``True``.
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        if "=" in pair:
            key, value = pair.split("=", 1)
        else:
            key, value = pair, True
        if not key:
            raise ParameterValidationException(f"Invalid parameter: {pair!r}")
        if key in params:
            existing = params[key]
            if not isinstance(existing, list):
                existing = [existing]
            existing.append(value)
            params[key] = existing
        else:
            params[key] = value
    return params


async def _send(command: str, endpoint: str | None, config: ClientConfig, params: dict[str, Any]) -> Any:
    async with HttpClient(endpoint, config=config) as client:
        if command == "query":
            return await client.query(params)
        if command == "post":
            return await client.post(params)
        return await client.get(params)


def cmd_request(args: Namespace) -> int:
    """Execute a get / post / query command."""
    config: ClientConfig = args.client_config
    try:
        params = parse_pairs(args.params)
        if args.command == "query":
            params.setdefault("action", "query")
        result = asyncio.run(_send(args.command, args.endpoint, config, params))
    except MediaWikiApiException as e:
        print(e.message, file=sys.stderr)
        return EXIT_API_ERROR
    except (ParameterValidationException, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return EXIT_SUCCESS
