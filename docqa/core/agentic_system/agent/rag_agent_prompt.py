"""
Grounded answer prompt.

Numbers each context passage and instructs the model to answer only from
those passages, cite them, and say so when they are insufficient.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answer generation
"""

from collections.abc import Sequence

from langchain_core.prompts import PromptTemplate

RAG_PROMPT_TEMPLATE = """You are a helpful assistant. Answer the question using ONLY the provided context.
If the answer is not found in the context, state that clearly and do not make up information.

Question: {question}

Context:
{context}

Answer with citations (e.g., [1], [2]):"""

RAG_AGENT_PROMPT = PromptTemplate.from_template(RAG_PROMPT_TEMPLATE)


def format_context(passages: Sequence[str]) -> str:
    """Label passages [1], [2], ... separated by blank lines."""
    return "\n\n".join(f"[{i}] {passage}" for i, passage in enumerate(passages, start=1))


def build_rag_prompt(question: str, passages: Sequence[str]) -> str:
    """
    Render the grounded answer prompt.

    Args:
        question: User question
        passages: Context passages in relevance order

    Returns:
        str: Prompt text
    """
    return RAG_AGENT_PROMPT.format(question=question, context=format_context(passages))
