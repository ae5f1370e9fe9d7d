from ._keypath import delete_path, flatten, get_path, has_path, set_path
from ._logs import setup_logging
from ._text import concat, is_empty
from ._url import add_params, build_query_pairs
from ._user_agent import user_agent_value

__all__ = [
    "add_params",
    "build_query_pairs",
    "concat",
    "delete_path",
    "flatten",
    "get_path",
    "has_path",
    "is_empty",
    "set_path",
    "setup_logging",
    "user_agent_value",
]
