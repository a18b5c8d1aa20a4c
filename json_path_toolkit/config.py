"""Settings for the toolkit UI, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_VERBOSITY = "JSON_PATH_TOOLKIT_VERBOSITY"
ENV_FOLDER = "JSON_PATH_TOOLKIT_FOLDER"
ENV_DEFAULT_VALUE = "JSON_PATH_TOOLKIT_DEFAULT_VALUE"


@dataclass(frozen=True)
class ToolkitSettings:
    """Runtime settings.

    Attributes:
        verbosity: Logger verbosity (0=errors, 1=info, 2=debug)
        default_folder: Folder pre-filled in the path preparation tab
        default_value: Value returned by lookups that find nothing
    """

    verbosity: int = 0
    default_folder: str = ""
    default_value: str = ""


def _parse_verbosity(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        return max(0, int(raw.strip()))
    except ValueError:
        return 0


def load_settings(load_env_file: bool = True) -> ToolkitSettings:
    """Build settings from environment variables.

    Args:
        load_env_file: Also load variables from a `.env` file found from the
            working directory upwards (existing environment variables win)
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    return ToolkitSettings(
        verbosity=_parse_verbosity(os.getenv(ENV_VERBOSITY)),
        default_folder=os.getenv(ENV_FOLDER, ""),
        default_value=os.getenv(ENV_DEFAULT_VALUE, ""),
    )
