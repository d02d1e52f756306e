"""
Restaurant catalog.

Responsibilities:
- Load the fixed restaurant fixture into memory once.
- Search, filter and sort it for the current UI state.
- Shape the result into the view consumed by the presentation layer.
"""
