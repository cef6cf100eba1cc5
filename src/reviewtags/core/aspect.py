"""Aspect dictionaries for keyword tagging."""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .constants import DomainConstants

logger = logging.getLogger(__name__)


class AspectDictionary:
    """Static mapping of aspect name to keyword list.

    Each keyword belongs to exactly one aspect. Keywords are stored lowercase
    and may span several words ("wait staff"); they are matched against
    token sequences, so they are kept pre-split as tuples.
    """

    def __init__(self, aspects: Mapping[str, Sequence[str]]):
        if not aspects:
            raise ValueError("Aspect dictionary must define at least one aspect")

        self._aspects: Dict[str, List[str]] = {}
        self._keyword_aspect: Dict[Tuple[str, ...], str] = {}

        for aspect, keywords in aspects.items():
            if isinstance(keywords, str) or not keywords:
                raise ValueError(f"Aspect '{aspect}' needs a non-empty keyword list")
            cleaned = []
            for keyword in keywords:
                parts = tuple(str(keyword).lower().split())
                if not parts:
                    continue
                owner = self._keyword_aspect.get(parts)
                if owner is not None and owner != aspect:
                    raise ValueError(
                        f"Keyword '{' '.join(parts)}' assigned to both '{owner}' and '{aspect}'"
                    )
                if owner is None:
                    self._keyword_aspect[parts] = aspect
                    cleaned.append(" ".join(parts))
            self._aspects[str(aspect)] = cleaned

    @classmethod
    def default(cls) -> "AspectDictionary":
        """Restaurant aspects: service, food, price, environment."""
        return cls(DomainConstants.RESTAURANT_ASPECTS)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AspectDictionary":
        """Load aspects from a YAML file of the form ``{aspect: [keywords]}``."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Aspect dictionary not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Aspect dictionary {path} must be a mapping of aspect to keywords")
        logger.info(f"Loaded {len(data)} aspects from {path}")
        return cls(data)

    @property
    def aspects(self) -> List[str]:
        return list(self._aspects)

    def keywords(self, aspect: str) -> List[str]:
        return list(self._aspects[aspect])

    def all_keywords(self) -> List[str]:
        return [kw for keywords in self._aspects.values() for kw in keywords]

    def aspect_of(self, keyword: str) -> Optional[str]:
        return self._keyword_aspect.get(tuple(keyword.lower().split()))

    def patterns(self) -> Iterator[Tuple[Tuple[str, ...], str]]:
        """Yield (keyword tokens, aspect) pairs, longest keywords first."""
        for parts, aspect in sorted(self._keyword_aspect.items(), key=lambda kv: -len(kv[0])):
            yield parts, aspect

    def to_dict(self) -> Dict[str, List[str]]:
        return {aspect: list(keywords) for aspect, keywords in self._aspects.items()}

    def __len__(self) -> int:
        return len(self._aspects)

    def __contains__(self, aspect: str) -> bool:
        return aspect in self._aspects


def load_aspect_dictionary(path: Optional[Union[str, Path]] = None) -> AspectDictionary:
    """Aspect dictionary from ``path``, or the built-in restaurant aspects."""
    if path:
        return AspectDictionary.from_yaml(path)
    return AspectDictionary.default()
