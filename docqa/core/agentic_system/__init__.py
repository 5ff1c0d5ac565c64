"""
Agentic system.

agent: grounded answer generation over retrieved passages.
task_agent: intent classification, tool dispatch and response composition.
"""
