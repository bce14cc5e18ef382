# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free logic for the translator tools: the data model, the tool
# registry, the handlers, the completion adapter and its configuration.
#
# Nothing in this package imports FastMCP or Google ADK.  The only outside
# services it reaches are the completion endpoint (through litellm) and the
# identity provider (through azure-identity), and both sit behind small
# interfaces so tests can replace them.
# =============================================================================
