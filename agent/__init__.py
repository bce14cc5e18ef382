# =============================================================================
# agent/__init__.py
# =============================================================================
# A demo MCP client: a Google ADK agent that starts tools/mcp_server.py as a
# subprocess and chats with the user as a translation assistant.
#
# The agent owns no tool logic.  It only decides WHICH tool to call
# (TranslateTool, GetSupportedLanguages, Add, ...) and how to present the
# answer.  Everything it can do is whatever the server advertises.
# =============================================================================
