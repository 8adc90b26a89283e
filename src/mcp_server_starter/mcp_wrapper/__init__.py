from .server import SERVER_NAME, SERVER_VERSION, build_server, run_stdio, to_call_tool_result

__all__ = ["SERVER_NAME", "SERVER_VERSION", "build_server", "run_stdio", "to_call_tool_result"]
