"""
Source layout for a documentation corpus.

Each category of document lives at a conventional path under the document
root. A corpus can move any of them by dropping an llmdoc.yaml next to its
docs:

    sources:
      tasks_file: planning/backlog.md
      adrs_dir: decisions

Paths are relative to the document root, except current_sprint_file and
sprint_archive_dir which are relative to sprints_dir. If no layout file
exists, the defaults below are used.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

LAYOUT_FILE_NAME = "llmdoc.yaml"

DEFAULT_SOURCES = {
    "tasks_file": "agile/tasks.md",
    "user_stories_file": "agile/user-stories.md",
    "sprints_dir": "agile/sprints",
    "current_sprint_file": "sprint-current-plan.md",
    "sprint_archive_dir": "archive",
    "components_dir": "components",
    "adrs_dir": "architecture",
}


@dataclass
class SourceLayout:
    """Resolved source locations for one document root."""
    root: Path
    sources: dict[str, str] = field(default_factory=lambda: DEFAULT_SOURCES.copy())

    def path(self, key: str) -> Path:
        return self.root / self.sources[key]

    @property
    def tasks_file(self) -> Path:
        return self.path("tasks_file")

    @property
    def user_stories_file(self) -> Path:
        return self.path("user_stories_file")

    @property
    def sprints_dir(self) -> Path:
        return self.path("sprints_dir")

    @property
    def current_sprint_file(self) -> Path:
        return self.sprints_dir / self.sources["current_sprint_file"]

    @property
    def sprint_archive_dir(self) -> Path:
        return self.sprints_dir / self.sources["sprint_archive_dir"]

    @property
    def components_dir(self) -> Path:
        return self.path("components_dir")

    @property
    def adrs_dir(self) -> Path:
        return self.path("adrs_dir")


def load_layout(docs_dir: Path) -> SourceLayout:
    """Load llmdoc.yaml from *docs_dir* and return the SourceLayout.

    Falls back to the defaults when the file is absent or unusable.
    """
    layout_path = docs_dir / LAYOUT_FILE_NAME
    if not layout_path.exists():
        return SourceLayout(root=docs_dir)

    try:
        data = yaml.safe_load(layout_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {layout_path}: {e}")
        return SourceLayout(root=docs_dir)

    overrides = data.get("sources") if isinstance(data, dict) else None
    if overrides is None:
        return SourceLayout(root=docs_dir)
    if not isinstance(overrides, dict):
        logger.warning(f"Ignoring {layout_path}: 'sources' must be a mapping")
        return SourceLayout(root=docs_dir)

    sources = DEFAULT_SOURCES.copy()
    for key, value in overrides.items():
        if key not in DEFAULT_SOURCES:
            logger.warning(f"Unknown source key '{key}' in {layout_path}, ignoring")
            continue
        sources[key] = str(value)

    return SourceLayout(root=docs_dir, sources=sources)
