# skillquest/core/topics.py
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from skillquest.core.errors import ValidationError

# topic name -> endpoint path on the aptitude API
DEFAULT_TOPICS = {
    "Mixture and Alligation": "MixtureAndAlligation",
    "Profit and Loss": "ProfitAndLoss",
    "Pipes and Cisterns": "PipesAndCistern",
    "Age": "Age",
    "Permutation and Combination": "PermutationAndCombination",
    "Speed Time Distance": "SpeedTimeDistance",
    "Simple Interest": "SimpleInterest",
    "Calendars": "Calendar",
}


class TopicCatalog:
    """Read-only table of the known aptitude topics.

    Built once when the application is created and shared through
    ``app.state``; nothing mutates it afterwards.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._endpoints = MappingProxyType(dict(mapping if mapping is not None else DEFAULT_TOPICS))

    def __contains__(self, topic: object) -> bool:
        return topic in self._endpoints

    def __iter__(self) -> Iterator[str]:
        return iter(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)

    @property
    def names(self) -> list[str]:
        return list(self._endpoints)

    def endpoint_for(self, topic: str) -> str:
        try:
            return self._endpoints[topic]
        except KeyError:
            raise ValidationError(f"Invalid topic: {topic}") from None

    def validate(self, topics) -> None:
        for topic in topics:
            if topic not in self._endpoints:
                raise ValidationError(f"Invalid topic: {topic}")
