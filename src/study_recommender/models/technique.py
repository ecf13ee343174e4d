"""Study technique catalog models."""

from collections.abc import Iterable, Iterator
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class TechniqueType(StrEnum):
    """Learning modality a technique primarily engages."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    READING = "reading"
    KINESTHETIC = "kinesthetic"
    MIXED = "mixed"


class Difficulty(StrEnum):
    """Technique difficulty tiers."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class StudyTechnique(BaseModel):
    """A single entry of the static technique catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    type: TechniqueType
    effectiveness: float = Field(gt=0.0, le=1.0)
    difficulty: Difficulty
    estimated_time: float = Field(ge=0.0)  # minutes
    tags: tuple[str, ...] = ()


class CatalogError(ValueError):
    """Raised when catalog data cannot form a consistent catalog."""


class TechniqueCatalog:
    """Read-only, ordered collection of study techniques indexed by id.

    Iteration order is the load order and doubles as the tie-break order
    when two techniques score the same.
    """

    def __init__(self, techniques: Iterable[StudyTechnique] = ()) -> None:
        self._techniques: tuple[StudyTechnique, ...] = tuple(techniques)
        index: dict[str, StudyTechnique] = {}
        for technique in self._techniques:
            if technique.id in index:
                raise CatalogError(f"Duplicate technique id: {technique.id}")
            index[technique.id] = technique
        self._index = MappingProxyType(index)

    def __iter__(self) -> Iterator[StudyTechnique]:
        return iter(self._techniques)

    def __len__(self) -> int:
        return len(self._techniques)

    def __contains__(self, technique_id: object) -> bool:
        return technique_id in self._index

    @property
    def techniques(self) -> tuple[StudyTechnique, ...]:
        return self._techniques

    def get(self, technique_id: str) -> StudyTechnique | None:
        """Look up a technique by id."""
        return self._index.get(technique_id)
