"""Data stores for persistence and session state.

Stores handle:
- Blog files: the live/archive/<year>/<slug>.md directory layout
- JSON file: the projects array
- Memory: process-scoped expiring map (CAPTCHA sessions)
- Redis: shared expiring keys (CAPTCHA sessions across replicas)

No business logic in stores - that belongs in services.
"""
