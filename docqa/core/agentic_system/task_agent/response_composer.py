"""
Response composer.

Turns a tool output into the text returned to the user. Never raises.

Dependencies: None
System role: Final stage of the task agent
"""

import logging

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 150
NO_SEARCH_RESULTS = "No relevant documents found for your search query in the knowledge base."
FALLBACK_RESPONSE = "I'm sorry, I couldn't process that request fully. Please try again."


def _preview(content: str) -> str:
    if len(content) > PREVIEW_LENGTH:
        return content[:PREVIEW_LENGTH] + "..."
    return content


def _compose_search(tool_output) -> str:
    count = tool_output.result_count
    if count <= 0:
        return NO_SEARCH_RESULTS

    results = tool_output.results or []
    top_content = getattr(results[0], "content", None) if results else None
    if isinstance(top_content, str) and top_content:
        return (
            f"Found {count} relevant results. "
            f'Here\'s a snippet from the top result: "{_preview(top_content)}"'
        )
    return f"Found {count} relevant results in the knowledge base."


def compose_response(tool_output) -> str:
    """
    Map a tool output to user-facing text.

    Args:
        tool_output: AnswerOutput, SearchOutput, QueryCountOutput or ErrorOutput

    Returns:
        str: Human-readable response; a generic fallback for anything unexpected
    """
    try:
        output_type = getattr(tool_output, "type", None)
        if output_type == "answer":
            return tool_output.text
        if output_type == "search":
            return _compose_search(tool_output)
        if output_type == "query_count":
            return f"The total number of queries processed so far is: {tool_output.count}."
        if output_type == "error":
            return tool_output.message
    except Exception as e:
        logger.error(f"{__name__}:compose_response - Failed to compose response: {e}")
    return FALLBACK_RESPONSE
