"""
Tests for the question answering and stats endpoints.

System role: Verification of the agent HTTP API
"""

from unittest.mock import patch

from conftest import ScriptedLanguageModel, agent_model
from docqa.core.agentic_system.task_agent.tool_dispatcher import UNRECOGNIZED_REQUEST

PARIS = "Paris is the capital of France."


def index(client, text: str = PARIS) -> None:
    response = client.post("/api/index-document", json={"documentText": text})
    assert response.status_code == 200


class TestAnswerQuestion:
    """Test suite for POST /api/answer-question."""

    def test_answer_should_use_camel_case_fields(self, make_client) -> None:
        client = make_client(llm=agent_model("answer_question", "Paris is the capital of France [1]."))
        index(client)

        response = client.post("/api/answer-question", json={"question": "What is the capital of France?"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["answer"] == "Paris is the capital of France [1]."
        assert body["chunksRetrieved"] == 1
        assert isinstance(body["duration"], int)
        assert "queryCount" not in body

    def test_search_intent_should_return_results(self, make_client) -> None:
        client = make_client(llm=agent_model("search_knowledge_base"))
        index(client)

        body = client.post("/api/answer-question", json={"question": "Search for France"}).json()

        assert body["resultCount"] == 1
        result = body["searchResults"][0]
        assert result["content"] == PARIS
        assert result["chunkId"].startswith("chunk_0_")
        assert isinstance(result["relevanceScore"], float)

    def test_query_count_intent_should_return_count(self, make_client) -> None:
        client = make_client(llm=agent_model("get_query_count"))

        body = client.post("/api/answer-question", json={"question": "How many queries?"}).json()

        assert body["queryCount"] == 1
        assert body["answer"] == "The total number of queries processed so far is: 1."

    def test_unknown_intent_should_return_success_false(self, make_client) -> None:
        client = make_client(llm=agent_model("unknown"))

        response = client.post("/api/answer-question", json={"question": "Tell me a joke"})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["answer"] == UNRECOGNIZED_REQUEST

    def test_blank_question_should_return_400(self, make_client) -> None:
        response = make_client().post("/api/answer-question", json={"question": "   "})

        assert response.status_code == 400
        assert response.json()["error"] == "Question is required and cannot be empty."

    def test_missing_question_should_return_400(self, make_client) -> None:
        response = make_client().post("/api/answer-question", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Question is required."


class TestSearchKnowledgeBase:
    """Test suite for POST /api/search-knowledge-base."""

    def test_search_should_answer_and_count(self, make_client, counter) -> None:
        llm = ScriptedLanguageModel("Paris is the capital of France [1].")
        client = make_client(llm=llm)
        index(client)

        response = client.post("/api/search-knowledge-base", json={"question": "What is the capital of France?"})

        assert response.status_code == 200
        body = response.json()
        assert body["answer"] == "Paris is the capital of France [1]."
        assert body["chunksRetrieved"] == 1
        assert llm.intent_prompts == []

        stats = client.get("/api/agent-stats").json()
        assert stats["totalQueries"] == 1


class TestAgentStats:
    """Test suite for GET /api/agent-stats."""

    def test_stats_should_be_empty_initially(self, make_client) -> None:
        body = make_client().get("/api/agent-stats").json()

        assert body == {"success": True, "totalQueries": 0, "lastQueryTime": None, "queryLogs": []}

    def test_stats_should_list_logged_queries(self, make_client) -> None:
        client = make_client(llm=agent_model("get_query_count"))
        client.post("/api/answer-question", json={"question": "How many queries?"})

        body = client.get("/api/agent-stats").json()

        assert body["totalQueries"] == 1
        assert body["lastQueryTime"] is not None
        log = body["queryLogs"][0]
        assert log["query"] == "How many queries?"
        assert log["chunksRetrieved"] == 0
        assert "duration" in log


class TestErrorHandling:
    """Test suite for the JSON error handlers."""

    def test_unknown_route_should_return_404(self, make_client) -> None:
        response = make_client().get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Endpoint not found"}

    def test_unhandled_error_should_return_500(self, make_client, counter) -> None:
        client = make_client(raise_server_exceptions=False)

        with patch.object(counter, "increment", side_effect=RuntimeError("disk on fire")):
            response = client.post("/api/search-knowledge-base", json={"question": "Anything?"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Internal server error"
        assert body["details"] == "disk on fire"
