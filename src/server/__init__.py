"""MCP server exposing llmsdocs tools."""
