"""Business logic services.

Services contain all business logic and are called by routes.
Services take their stores explicitly; the ``get_*`` accessors build them
from settings for the routes.
"""
