class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class ToolCallError(MCPJiraError):
    """Raised when a tool call cannot be executed at all."""

    def __init__(self, message: str, tool_name: str | None = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name


class UnknownToolError(ToolCallError):
    """Raised when the requested tool name is not in the catalog."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", tool_name=tool_name)


class ToolArgumentError(ToolCallError, ValueError):
    """Raised when tool arguments cannot be decoded."""

    pass


class MissingArgumentError(ToolArgumentError):
    """Raised when one or more required tool arguments are absent."""

    def __init__(self, tool_name: str, fields: list[str]) -> None:
        super().__init__(
            f"Missing required argument(s) for {tool_name}: {', '.join(fields)}",
            tool_name=tool_name,
        )
        self.fields = fields


class InvalidArgumentError(ToolArgumentError):
    """Raised when a tool argument is present but malformed."""

    pass
