"""
Interaction analytics.

Responsibilities:
- Record each applied action and each rendered view in memory.
- Aggregate the log into usage statistics for the diagnostics endpoint.
"""
