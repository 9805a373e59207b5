"""
Project level options: name, working directory and .env loading.
"""
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel
from .logger import get_logger

logger = get_logger(__name__)

PROJECT_NAME_ENV = "COMPOSE_PROJECT_NAME"
PROJECT_DIRECTORY_ENV = "COMPOSE_PROJECT_DIRECTORY"


class ProjectOptions(BaseModel):
    """
    Overrides for the generated project's metadata. Empty strings mean
    no override was given.
    """
    project_name: str = ""
    working_dir: str = ""

    def resolve_name(self) -> str:
        return self.project_name

    def resolve_working_dir(self) -> str:
        """
        Returns the working directory override, falling back to the
        current directory of the process.

        :return: The working directory, or an empty string when it cannot
            be determined.
        """
        if self.working_dir:
            return self.working_dir

        try:
            return os.getcwd()
        except OSError as e:
            logger.warning("unable to get working directory: %s", e)
            return ""


def load_env_file(env_file: Optional[str]) -> bool:
    """
    Loads variables from a .env file into the process environment without
    overriding variables that are already set.

    :param env_file: Path to the file, or None to skip.
    :return: True if any variable was loaded.
    """
    if not env_file:
        return False
    loaded = load_dotenv(env_file, override=False)
    if not loaded:
        logger.debug("no variables loaded from %s", env_file)
    return loaded
