from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union


@dataclass(frozen=True)
class ContentIssue:
    """A single problem found while checking the content directory."""

    path: Optional[Path]
    message: str

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class ContentError(Exception):
    """Base class for content store errors."""


class FrontMatterError(ContentError):
    """A document header is missing, malformed or fails validation."""

    def __init__(self, message: str, source: Union[str, Path, None] = None, problems: Sequence[str] = ()):
        self.source = source
        self.problems: List[str] = list(problems)
        detail = message
        if self.problems:
            detail = f"{message}: " + "; ".join(self.problems)
        self.detail = detail
        if source is not None:
            detail = f"{source}: {detail}"
        super().__init__(detail)


class ContentValidationError(ContentError):
    """The content directory contains one or more invalid documents."""

    def __init__(self, issues: Sequence[ContentIssue]):
        self.issues: List[ContentIssue] = list(issues)
        lines = "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(f"{len(self.issues)} content issue(s) found:\n{lines}")


class DocumentNotFoundError(ContentError, KeyError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(slug)

    def __str__(self) -> str:
        return f"no document with slug {self.slug!r}"
