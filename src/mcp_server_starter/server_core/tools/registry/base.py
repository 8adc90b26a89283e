"""Tool registry and dispatcher."""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from ..models import ToolCallRequest, ToolCallResult, ToolDefinition, ToolResult
from ..schema import SchemaValidator
from ...exceptions import InvalidInputError, ServerError, ToolRegistrationError, UnknownToolError
from ...logger import get_logger

logger = get_logger(__name__)

ToolHandler = Callable[[Any], Awaitable[ToolResult]]


class ToolRegistry:
    """
    A central registry to manage, list and invoke the server's tools.

    The registry holds the tool descriptors published to clients and maps tool
    names to their async implementations. It is the single place where a
    failed invocation is turned into an error result: ``call_tool`` never raises.
    """

    def __init__(self) -> None:
        """Initialize the ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(
        self,
        name_or_tool: Union[str, ToolDefinition],
        description: Optional[str] = None,
        func: Optional[ToolHandler] = None,
        args_model: Optional[Type[BaseModel]] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Register a new tool.

        A tool can be registered either by passing a `ToolDefinition` directly, or by
        passing its components. If no explicit `parameters` schema is given, it is
        generated from `args_model`.

        Args:
            name_or_tool: Either a `ToolDefinition` object or the name of the tool.
            description: What the tool does. Required if `name_or_tool` is a string.
            func: The async handler. Required if `name_or_tool` is a string.
            args_model: Pydantic model used to decode the call arguments.
            parameters: Explicit JSON schema for the tool input.

        Raises:
            ToolRegistrationError: If components are missing or the tool name is already taken.
        """
        if isinstance(name_or_tool, ToolDefinition):
            tool = name_or_tool
        else:
            if func is None or description is None:
                raise ToolRegistrationError("If passing name as string, description and func are required.")
            if parameters is None:
                if args_model is None:
                    raise ToolRegistrationError(
                        f"Tool '{name_or_tool}' needs either an args_model or an explicit parameters schema."
                    )
                parameters = SchemaValidator.from_model(args_model)
            tool = ToolDefinition(
                name=name_or_tool, description=description, func=func, parameters=parameters, args_model=args_model
            )

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.info(f"Successfully registered tool: '{tool.name}'")

    def unregister(self, tool_name: str) -> None:
        """Unregister a tool from the registry.

        Args:
            tool_name: The name of the tool to remove.

        Raises:
            UnknownToolError: If the tool does not exist in the registry.
        """
        if tool_name in self.tools:
            del self.tools[tool_name]
            logger.info(f"Successfully unregistered tool: '{tool_name}'")
        else:
            raise UnknownToolError(f"Tool '{tool_name}' not found in the registry.")

    def list_tools(self) -> List[ToolDefinition]:
        """Returns all registered tools in registration order."""
        return list(self.tools.values())

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Invoke a tool by name and always return a well-formed result.

        Args:
            name: Exact tool name.
            arguments: Untyped call arguments.

        Returns:
            The handler's result, or an error result with ``is_error`` set.
        """
        outcome = await self.execute(ToolCallRequest(name=name, arguments=arguments or {}))
        return outcome.to_tool_result()

    async def execute(self, request: ToolCallRequest) -> ToolCallResult:
        """Handle a single tool call request.

        Resolves the tool, decodes the arguments with its args model and runs the
        handler. Every failure is captured in the returned ToolCallResult.

        Args:
            request: The tool call request containing name and arguments.

        Returns:
            The outcome of the call.
        """
        tool = self.tools.get(request.name)
        if tool is None:
            msg = f"Unknown tool: {request.name}"
            logger.warning(msg)
            return ToolCallResult.failure(request.name, UnknownToolError(msg))

        logger.info("Executing tool '%s'...", request.name)
        logger.debug("Tool arguments: %s", request.arguments)

        try:
            args = self._decode_arguments(tool, request.arguments)
            result = await tool.func(args)
        except ServerError as e:
            logger.warning(f"Error in '{request.name}': {e} ({type(e).__name__})")
            return ToolCallResult.failure(request.name, e)
        except Exception as e:
            logger.error(f"Unexpected error executing tool '{request.name}': {e}", exc_info=True)
            return ToolCallResult.failure(request.name, ServerError(str(e) or type(e).__name__))

        if not isinstance(result, ToolResult):
            msg = f"Tool '{request.name}' returned {type(result).__name__} instead of a ToolResult."
            logger.error(msg)
            return ToolCallResult.failure(request.name, ServerError(msg))

        logger.info("Tool '%s' executed successfully.", request.name)
        return ToolCallResult.success(request.name, result)

    @staticmethod
    def _decode_arguments(tool: ToolDefinition, arguments: Any) -> Any:
        """Decode raw arguments into the tool's args model.

        Raises:
            InvalidInputError: If the arguments do not match the model.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidInputError(f"Arguments for tool '{tool.name}' must be a JSON object.")
        if tool.args_model is None:
            return arguments

        try:
            return tool.args_model.model_validate(arguments)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()
            )
            raise InvalidInputError(f"Invalid arguments for tool '{tool.name}': {details}") from e
