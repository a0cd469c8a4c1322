"""Context assembly: the whole stored corpus, joined into one prompt section."""
from store.base import BaseDocumentStore

DOCUMENT_SEPARATOR = "\n\n"


class ContextAssembler:
    """Concatenates every stored document's content in insertion order.

    There is no relevance filtering or ranking; the context grows linearly with
    the number of documents and is bounded only by the per-document cap.
    """

    def __init__(self, store: BaseDocumentStore, separator: str = DOCUMENT_SEPARATOR):
        self.store = store
        self.separator = separator

    def build_context(self) -> str:
        return self.separator.join(self.store.all_content())
