"""
Parses container environment lists into Compose environment mappings.
"""
from typing import Dict, Iterable, List, Optional


def map_environment(env: Iterable[str]) -> Dict[str, Optional[str]]:
    """
    Parses ``KEY=VALUE`` and bare ``KEY`` entries.

    Values are split on the first ``=`` only and kept verbatim, so empty
    strings survive. A bare key maps to None, meaning the variable is
    declared without a value. When a key repeats, the last entry wins.

    :param env: The container's environment list.
    :return: An ordered mapping of variable names to values.
    """
    environment: Dict[str, Optional[str]] = {}
    for entry in env:
        if "=" in entry:
            key, value = entry.split("=", 1)
            environment[key] = value
        else:
            environment[entry] = None
    return environment


def serialize_environment(environment: Dict[str, Optional[str]]) -> List[str]:
    """
    Renders a mapping back into the engine's list form.
    """
    return [key if value is None else f"{key}={value}" for key, value in environment.items()]
