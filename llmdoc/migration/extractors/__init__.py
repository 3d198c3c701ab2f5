"""
Per-category extractors.

build_extractors() returns them in the order the migrator runs them.
"""

from llmdoc.lib.layout import SourceLayout
from llmdoc.migration.extractors.adrs import AdrExtractor
from llmdoc.migration.extractors.base import Extractor, ExtractionResult
from llmdoc.migration.extractors.components import ComponentExtractor
from llmdoc.migration.extractors.sprints import SprintExtractor
from llmdoc.migration.extractors.tasks import TaskExtractor
from llmdoc.migration.extractors.user_stories import UserStoryExtractor


def build_extractors(layout: SourceLayout) -> list[Extractor]:
    return [
        TaskExtractor(layout),
        SprintExtractor(layout),
        UserStoryExtractor(layout),
        ComponentExtractor(layout),
        AdrExtractor(layout),
    ]


__all__ = [
    "Extractor",
    "ExtractionResult",
    "TaskExtractor",
    "SprintExtractor",
    "UserStoryExtractor",
    "ComponentExtractor",
    "AdrExtractor",
    "build_extractors",
]
