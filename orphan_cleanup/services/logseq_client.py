"""Async client for the Logseq desktop HTTP API server.

Every call is a ``POST`` to the API endpoint with a JSON body naming the
plugin-API method and its positional arguments::

    {"method": "logseq.Editor.getAllPages", "args": []}

The response body is the method's return value serialised as JSON.
"""

import logging
from typing import Any, List, Optional

import httpx

from orphan_cleanup.models.page import BlockModel, PageModel
from orphan_cleanup.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10  # seconds


class LogseqAPIError(RuntimeError):
    """The API server answered, but the method call itself failed."""


class LogseqClient:
    def __init__(self, api_url: str, token: Optional[str], timeout: float = DEFAULT_TIMEOUT):
        self.api_url = api_url
        self.token = token
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "LogseqClient":
        return cls(
            api_url=settings.LOGSEQ_API_URL,
            token=settings.LOGSEQ_API_TOKEN,
            timeout=settings.LOGSEQ_API_TIMEOUT,
        )

    async def call(self, method: str, *args: Any) -> Any:
        """Invoke *method* on the Logseq plugin API and return its result.

        Raises:
            ValueError: if no API token is configured.
            httpx.HTTPError: on network or HTTP errors.
            LogseqAPIError: if Logseq reports an error for the call.
        """
        if not self.token:
            raise ValueError("LOGSEQ_API_TOKEN is not set; create a token in Logseq's API server settings.")

        headers = {"Authorization": f"Bearer {self.token}"}
        payload = {"method": method, "args": list(args)}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(self.api_url, json=payload, headers=headers)
            resp.raise_for_status()
            if not resp.content:
                return None
            data = resp.json()

        if isinstance(data, dict) and "error" in data:
            raise LogseqAPIError(f"{method} failed: {data['error']}")
        return data

    async def get_all_pages(self) -> List[PageModel]:
        items = await self.call("logseq.Editor.getAllPages")
        return [PageModel.model_validate(item) for item in items or []]

    async def get_page_blocks_tree(self, page_name: str) -> Optional[List[BlockModel]]:
        items = await self.call("logseq.Editor.getPageBlocksTree", page_name)
        if items is None:
            return None
        return [BlockModel.model_validate(item) for item in items]

    async def get_page_linked_references(self, page_name: str) -> Optional[List[Any]]:
        return await self.call("logseq.Editor.getPageLinkedReferences", page_name)

    async def delete_page(self, page_name: str) -> None:
        await self.call("logseq.Editor.deletePage", page_name)
        logger.info("Deleted page %s", page_name)

    async def show_msg(self, message: str, status: str = "info") -> None:
        await self.call("logseq.UI.showMsg", message, status)
