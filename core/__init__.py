# =============================================================================
# core/__init__.py
# =============================================================================
# Tool logic: fetch, validate, filter and format.
#
# Nothing in this package imports FastMCP or Google ADK.  Every coroutine
# takes a JsonClient, so it runs against a fake client in tests and against
# httpx in production.
# =============================================================================
