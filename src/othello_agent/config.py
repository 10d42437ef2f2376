import os
from dotenv import load_dotenv
from pathlib import Path
from typing import Optional

from othello_agent import PROJECT_ROOT

load_dotenv()

DEFAULT_SEARCH_DEPTH = 4


def resolve_path(string: str) -> Path:
    string = string.replace("PROJECT_ROOT", str(PROJECT_ROOT))
    string = string.replace("~", str(Path.home()))
    return Path(string).resolve()


def get_search_depth() -> int:
    raw = os.getenv("OTHELLO_AGENT_DEPTH", str(DEFAULT_SEARCH_DEPTH))
    depth = int(raw)

    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    return depth


def get_verbose() -> bool:
    return os.getenv("OTHELLO_AGENT_VERBOSE", "0") != "0"


def get_weights_path() -> Optional[Path]:
    raw = os.getenv("OTHELLO_AGENT_WEIGHTS")
    if not raw:
        return None
    return resolve_path(raw)


def get_weights_preset() -> str:
    return os.getenv("OTHELLO_AGENT_PRESET", "default")
