from typing import Dict, Iterable, List, Optional

import pytest

from orphan_cleanup.models.page import BlockModel, PageModel
from orphan_cleanup.settings import get_settings


class FakeHost:
    """In-memory stand-in for the Logseq API client.

    Pages are given as dicts in Logseq's wire shape.  Pages missing from
    *blocks* have no blocks; pages missing from *references* have no inbound
    links.  *errors* maps ``(method, page name)`` to the exception to raise.
    """

    def __init__(
        self,
        pages: Iterable[dict],
        blocks: Optional[Dict[str, Optional[List[dict]]]] = None,
        references: Optional[Dict[str, Optional[list]]] = None,
        errors: Optional[Dict[tuple, Exception]] = None,
    ):
        self.pages = [PageModel.model_validate(p) for p in pages]
        self.blocks = blocks or {}
        self.references = references or {}
        self.errors = errors or {}
        self.calls: List[tuple] = []
        self.toasts: List[tuple] = []

    def _record(self, method: str, name: Optional[str] = None) -> None:
        self.calls.append((method, name))
        exc = self.errors.get((method, name))
        if exc is not None:
            raise exc

    def called(self, method: str) -> List[Optional[str]]:
        return [name for m, name in self.calls if m == method]

    async def get_all_pages(self) -> List[PageModel]:
        self._record("get_all_pages")
        return list(self.pages)

    async def get_page_blocks_tree(self, name: str) -> Optional[List[BlockModel]]:
        self._record("get_page_blocks_tree", name)
        items = self.blocks.get(name, [])
        if items is None:
            return None
        return [BlockModel.model_validate(b) for b in items]

    async def get_page_linked_references(self, name: str) -> Optional[list]:
        self._record("get_page_linked_references", name)
        return self.references.get(name, [])

    async def delete_page(self, name: str) -> None:
        self._record("delete_page", name)
        self.pages = [p for p in self.pages if p.name != name]

    async def show_msg(self, message: str, status: str = "info") -> None:
        self.toasts.append((message, status))


@pytest.fixture
def make_host():
    return FakeHost


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Give every test a token and a fresh settings object."""
    monkeypatch.setenv("LOGSEQ_API_TOKEN", "test-token")
    monkeypatch.delenv("ORPHAN_PROTECT_JOURNALS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
