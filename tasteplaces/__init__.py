"""
Taste Places: a searchable, filterable Montreal restaurant list.

Responsibilities:
- Hold the fixed restaurant fixture in memory.
- Keep per-session UI state and apply user actions to it.
- Serve the derived restaurant view over HTTP.
"""
