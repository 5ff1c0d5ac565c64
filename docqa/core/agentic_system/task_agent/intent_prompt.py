"""
Intent classification prompt.

Dependencies: langchain_core.prompts
System role: Prompt template for the intent classifier
"""

from langchain_core.prompts import PromptTemplate

INTENT_PROMPT_TEMPLATE = """Classify the following user query into one of these categories:
- "answer_question": The user is asking a question that requires a direct answer from the knowledge base.
- "search_knowledge_base": The user wants to search the knowledge base for relevant documents or chunks.
- "get_query_count": The user wants to know the current total number of queries.
- "unknown": The query does not fit into any of the above categories.

Respond with only the category name.

Query: "{query}"
Category:"""

INTENT_PROMPT = PromptTemplate.from_template(INTENT_PROMPT_TEMPLATE)


def build_intent_prompt(query: str) -> str:
    return INTENT_PROMPT.format(query=query)
