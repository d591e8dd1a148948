"""Custom exceptions for llmsdocs."""


class LlmsDocsError(Exception):
    """Base exception for llmsdocs operations."""


class ConfigError(LlmsDocsError):
    """Configuration file is unreadable or invalid."""


class DocumentLoadError(LlmsDocsError):
    """Documentation corpus could not be read."""


class FetchError(DocumentLoadError):
    """Error while downloading a remote documentation corpus."""


class ToolError(LlmsDocsError):
    """Error while dispatching a tool call."""


class UnknownToolError(ToolError):
    """Tool name is not one of the supported tools."""


class ToolArgumentError(ToolError):
    """Tool arguments failed validation."""
