"""Shared service calls for the CLI commands.

Each helper opens a short-lived client, runs one request and converts client
errors into a red message plus exit code 1.
"""

import asyncio

from initializr.cli._console import abort
from initializr.client import InitializrClient
from initializr.exceptions import InitializrError
from initializr.metadata.models import InitializrMetadata
from initializr.project.request import ProjectRequest


def fetch_metadata_or_exit() -> InitializrMetadata:
    async def _fetch() -> InitializrMetadata:
        client = InitializrClient().start_client()
        try:
            return await client.fetch_metadata()
        finally:
            await client.close()

    try:
        return asyncio.run(_fetch())
    except InitializrError as exc:
        abort(exc.message)


def download_starter_or_exit(request: ProjectRequest) -> bytes:
    async def _download() -> bytes:
        client = InitializrClient().start_client()
        try:
            return await client.download_starter(request)
        finally:
            await client.close()

    try:
        return asyncio.run(_download())
    except InitializrError as exc:
        abort(exc.message)
