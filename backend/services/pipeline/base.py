"""Abstract base class for all ranking signals."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.pipeline.signals import ScoringContext


class BaseSignal(ABC):
    """One additive component of a candidate's match score.

    Subclasses must implement:
        - name: identifier used in the signal registry and score breakdowns
        - score(context): non-negative contribution for one candidate

    ``sign`` is -1 for penalties, which are subtracted from the total.
    """

    name: str = ""
    sign: int = 1

    @abstractmethod
    def score(self, context: "ScoringContext") -> float:
        """Raw (unsigned) contribution for the candidate in ``context``."""

    def contribution(self, context: "ScoringContext") -> float:
        return self.sign * self.score(context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
