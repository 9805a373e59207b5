"""
Exceptions raised by the generation pipeline.
"""


class D2CError(Exception):
    """Base class for d2c errors."""


class GenerationCancelled(D2CError):
    """
    Raised when a run is stopped before all containers were inspected.
    No partial project is produced.
    """

    def __init__(self, remaining: int):
        super().__init__(f"generation cancelled with {remaining} container(s) left to inspect")
        self.remaining = remaining
