"""
Session UI state.

Responsibilities:
- Describe the interaction state (search, filters, sort, expanded card).
- Apply discrete user actions as pure state transitions.
"""
