"""Read-only, in-memory index of the markdown articles."""

import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from blogstore.content.errors import (
    ContentIssue,
    ContentValidationError,
    DocumentNotFoundError,
    FrontMatterError,
)
from blogstore.content.frontmatter import load_document
from blogstore.schemas.article import ContentDocument

logger = logging.getLogger(__name__)


def _iter_markdown_files(directory: Path) -> List[Path]:
    # 忽略以 . 或 _ 开头的文件 (草稿、隐藏文件)
    return [
        path for path in sorted(directory.rglob("*.md"))
        if path.is_file() and not path.name.startswith((".", "_"))
    ]


def scan_directory(directory: Union[str, Path]) -> Tuple[List[ContentDocument], List[ContentIssue]]:
    """Load the valid documents and report the problems with the rest."""
    directory = Path(directory)
    issues: List[ContentIssue] = []
    documents: List[ContentDocument] = []

    if not directory.is_dir():
        issues.append(ContentIssue(directory, "content directory does not exist"))
        return documents, issues

    seen: Dict[str, Path] = {}
    for path in _iter_markdown_files(directory):
        try:
            document = load_document(path)
        except FrontMatterError as exc:
            logger.warning("Skipping invalid document %s: %s", path, exc)
            issues.append(ContentIssue(path, exc.detail))
            continue
        except UnicodeDecodeError as exc:
            logger.warning("Skipping undecodable document %s: %s", path, exc)
            issues.append(ContentIssue(path, f"not valid UTF-8 ({exc.reason})"))
            continue

        first = seen.get(document.slug)
        if first is not None:
            issues.append(ContentIssue(path, f"duplicate slug '{document.slug}' (already used by {first})"))
            continue
        seen[document.slug] = path
        documents.append(document)

    return documents, issues


def check_directory(directory: Union[str, Path]) -> List[ContentIssue]:
    """Return every problem in the content directory without raising."""
    _, issues = scan_directory(Path(directory))
    return issues


class ContentStore:
    """Articles keyed by slug, newest first."""

    def __init__(self, documents: Iterable[ContentDocument] = ()):
        ordered = sorted(documents, key=lambda doc: doc.slug)
        ordered.sort(key=lambda doc: doc.date, reverse=True)

        self._by_slug: Dict[str, ContentDocument] = {}
        for document in ordered:
            if document.slug in self._by_slug:
                raise ContentValidationError([
                    ContentIssue(document.source, f"duplicate slug '{document.slug}'")
                ])
            self._by_slug[document.slug] = document
        self._documents: Tuple[ContentDocument, ...] = tuple(ordered)

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "ContentStore":
        directory = Path(directory)
        documents, issues = scan_directory(directory)
        if issues:
            raise ContentValidationError(issues)
        logger.info("Loaded %d document(s) from %s", len(documents), directory)
        return cls(documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self):
        return iter(self._documents)

    def documents(self) -> List[ContentDocument]:
        return list(self._documents)

    def get(self, slug: str) -> ContentDocument:
        try:
            return self._by_slug[slug]
        except KeyError:
            raise DocumentNotFoundError(slug) from None

    def by_tag(self, tag: str) -> List[ContentDocument]:
        return [doc for doc in self._documents if tag in doc.tags]

    def search(self, keyword: str) -> List[ContentDocument]:
        """Case-insensitive match on title and body."""
        needle = keyword.casefold()
        return [
            doc for doc in self._documents
            if needle in doc.title.casefold() or needle in doc.body.casefold()
        ]

    def tags(self) -> Dict[str, int]:
        counts = Counter(tag for doc in self._documents for tag in doc.tags)
        return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


@lru_cache(maxsize=None)
def _load_cached(directory: Path) -> ContentStore:
    return ContentStore.from_directory(directory)


def get_content_store(content_dir: Union[str, Path]) -> ContentStore:
    """Load a content directory once per process."""
    return _load_cached(Path(content_dir).resolve())


def clear_content_store_cache() -> None:
    _load_cached.cache_clear()
