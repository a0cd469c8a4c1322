"""RAG service: answers questions about the uploaded documents."""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from chat.context import ContextAssembler
from chat.llm_clients.base import BaseLLMClient, GenerationError
from chat.models import ChatResponse
from domain.exceptions import ValidationError
from store.base import BaseDocumentStore

logger = logging.getLogger(__name__)


DEFAULT_PROMPT_TEMPLATE = (
    "Based on these documents:\n\n{context}\n\n"
    "Question: {question}\n\n"
    "Please provide a helpful answer based on the documents. "
    "If the information isn't available, say so."
)

DEFAULT_FALLBACK_MESSAGE = (
    "I've analyzed your documents and I'm ready to answer questions. "
    "Please ask me anything about the uploaded content."
)


@dataclass
class RAGConfig:
    """Configuration for RAG service.

    Attributes:
        prompt_template: Template with ``{context}`` and ``{question}`` fields
        fallback_message: Answer returned when generation fails and degradation is on
        degrade_on_error: If True, generation failures become the fallback answer;
            if False, the GenerationError propagates to the caller
    """
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE
    fallback_message: str = DEFAULT_FALLBACK_MESSAGE
    degrade_on_error: bool = True


class RAGService:
    """Service for document-grounded question answering.

    Every call rebuilds the context from the full corpus and sends a single
    prompt to the generation client. No conversation state is kept.

    Example usage:
        store = InMemoryDocumentStore()
        rag_service = RAGService(store=store, llm_client=GeminiClient(config, api_key=key))

        answer = await rag_service.answer("What is the total budget?")
        print(answer.response, answer.sources)
    """

    def __init__(
        self,
        store: BaseDocumentStore,
        llm_client: BaseLLMClient,
        config: Optional[RAGConfig] = None,
    ):
        """Initialize RAG service.

        Args:
            store: Document store holding the corpus
            llm_client: LLM client for generating responses
            config: RAG configuration (uses defaults if not provided)
        """
        self.store = store
        self.llm_client = llm_client
        self.config = config or RAGConfig()
        self.context_assembler = ContextAssembler(store)

    def build_prompt(self, question: str) -> str:
        """Build the full prompt for *question* from the current corpus."""
        return self.config.prompt_template.format(
            context=self.context_assembler.build_context(),
            question=question,
        )

    async def answer(self, question: Optional[str], **llm_kwargs) -> ChatResponse:
        """Answer a question using every stored document as context.

        Args:
            question: The user's question
            **llm_kwargs: Additional parameters for LLM generation

        Returns:
            ChatResponse with the answer and the corpus filenames as sources

        Raises:
            ValidationError: If the question is missing or blank
            GenerationError: If generation fails and degrade_on_error is False
        """
        if question is None or not question.strip():
            raise ValidationError("Message is required")

        prompt = self.build_prompt(question)
        sources = self.store.filenames()
        metadata = {
            "model": self.llm_client.config.model_name,
            "num_documents": len(sources),
            "fallback": False,
        }

        try:
            text = await asyncio.to_thread(self.llm_client.generate, prompt, **llm_kwargs)
        except GenerationError as exc:
            if not self.config.degrade_on_error:
                raise
            logger.warning("Generation failed, returning fallback answer: %s", exc)
            metadata["fallback"] = True
            metadata["error"] = str(exc)
            return ChatResponse(
                response=self.config.fallback_message,
                sources=sources,
                metadata=metadata,
            )

        return ChatResponse(response=text, sources=sources, metadata=metadata)
