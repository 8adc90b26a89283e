"""Canned prompt templates. Arguments are interpolated; nothing is generated."""

from typing import Callable, Dict, List, Mapping, Optional

from mcp import types

from mcp_server_starter.server_core import InvalidInputError, NotFoundError, get_logger

logger = get_logger(__name__)


def _require(arguments: Mapping[str, str], key: str, prompt: str) -> str:
    value = arguments.get(key)
    if not value:
        raise InvalidInputError(f"Prompt '{prompt}' requires the '{key}' argument.")
    return value


def render_greeting(arguments: Mapping[str, str]) -> str:
    name = _require(arguments, "name", "greeting")
    if arguments.get("style", "casual") == "formal":
        return f"Good day, {name}."
    return f"Hey there, {name}!"


def render_code_review(arguments: Mapping[str, str]) -> str:
    code = _require(arguments, "code", "code_review")
    language = arguments.get("language") or "typescript"
    focus = arguments.get("focus") or "readability"
    return (
        f"Reviewing {language} code focusing on {focus}:\n\n"
        f"```{language}\n{code}\n```\n\n"
        "[AI Code Review Placeholder]"
    )


class PromptCatalog:
    """Lists the ``greeting`` and ``code_review`` prompts and renders them."""

    def __init__(self) -> None:
        self._prompts: Dict[str, types.Prompt] = {
            "greeting": types.Prompt(
                name="greeting",
                description="Generate a personalized greeting",
                arguments=[
                    types.PromptArgument(name="name", description="The name of the person to greet", required=True),
                    types.PromptArgument(
                        name="style",
                        description="The style of greeting (formal or casual). Default: casual",
                        required=False,
                    ),
                ],
            ),
            "code_review": types.Prompt(
                name="code_review",
                description="Provide a code review for a given code snippet",
                arguments=[
                    types.PromptArgument(name="code", description="The code snippet to review", required=True),
                    types.PromptArgument(
                        name="language",
                        description="The programming language of the code. Default: typescript",
                        required=False,
                    ),
                    types.PromptArgument(
                        name="focus",
                        description="Specific areas to focus on (e.g., 'performance', 'security'). "
                        "Default: readability",
                        required=False,
                    ),
                ],
            ),
        }
        self._renderers: Dict[str, Callable[[Mapping[str, str]], str]] = {
            "greeting": render_greeting,
            "code_review": render_code_review,
        }

    def list_prompts(self) -> List[types.Prompt]:
        return list(self._prompts.values())

    def get_prompt(self, name: str, arguments: Optional[Mapping[str, str]] = None) -> types.GetPromptResult:
        """Render a prompt as a single assistant-authored text message.

        Raises:
            NotFoundError: If the prompt name is unknown.
            InvalidInputError: If a required argument is missing.
        """
        renderer = self._renderers.get(name)
        if renderer is None:
            logger.warning("Unknown prompt requested: %s", name)
            raise NotFoundError(f"Unknown prompt: {name}")

        text = renderer(arguments or {})
        return types.GetPromptResult(
            description=self._prompts[name].description,
            messages=[types.PromptMessage(role="assistant", content=types.TextContent(type="text", text=text))],
        )
