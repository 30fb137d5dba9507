"""Front-matter parsing and composition for markdown articles."""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

import yaml
from pydantic import ValidationError

from blogstore.content.errors import FrontMatterError
from blogstore.schemas.article import FRONT_MATTER_KEYS, ContentDocument, FrontMatter

logger = logging.getLogger(__name__)

DELIMITER = "---"


def split_front_matter(text: str, source: Union[str, Path, None] = None) -> Tuple[Dict[str, Any], str]:
    """Split a ``---`` delimited YAML header from the markdown body."""
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    lines = text.split("\n")

    if not lines or lines[0].strip() != DELIMITER:
        raise FrontMatterError("missing opening '---' delimiter", source)

    closing_index = None
    for idx in range(1, len(lines)):
        if lines[idx].strip() == DELIMITER:
            closing_index = idx
            break

    if closing_index is None:
        raise FrontMatterError("missing closing '---' delimiter", source)

    header = "\n".join(lines[1:closing_index])
    body = "\n".join(lines[closing_index + 1:]).lstrip("\n")

    try:
        data = yaml.safe_load(header)
    except (yaml.YAMLError, ValueError) as exc:
        # 非法日期 (2020-13-45) 在 YAML 构造时抛出 ValueError
        raise FrontMatterError("invalid YAML header", source, [str(exc)]) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("header must be a mapping", source, [f"got {type(data).__name__}"])

    return data, body


def _describe_errors(exc: ValidationError):
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "header"
        if error["type"] == "missing":
            yield f"missing key '{location}'"
        else:
            yield f"{location}: {error['msg']}"


def parse_document(text: str, source: Union[str, Path, None] = None) -> ContentDocument:
    """Parse an article and validate its header."""
    data, body = split_front_matter(text, source)
    front_matter = validate_front_matter(data, source)

    logger.debug("Parsed %s (slug=%s, %d tag(s))", source or "<string>", front_matter.slug, len(front_matter.tags))
    return ContentDocument(
        front_matter=front_matter,
        body=body,
        source=Path(source) if source is not None else None,
    )


def load_document(path: Path) -> ContentDocument:
    return parse_document(path.read_text(encoding="utf-8"), path)


def compose_document(front_matter: Union[FrontMatter, Mapping[str, Any]], body: str) -> str:
    """Render a header and body back into a markdown article."""
    if isinstance(front_matter, FrontMatter):
        data = front_matter.model_dump()
    else:
        data = dict(front_matter)

    ordered: Dict[str, Any] = {key: data.pop(key) for key in FRONT_MATTER_KEYS if key in data}
    ordered.update(data)

    header = yaml.safe_dump(ordered, sort_keys=False, allow_unicode=True, default_flow_style=False)
    body = body.lstrip("\n")
    if body and not body.endswith("\n"):
        body += "\n"
    return f"{DELIMITER}\n{header}{DELIMITER}\n\n{body}"


def validate_front_matter(data: Mapping[str, Any], source: Union[str, Path, None] = None) -> FrontMatter:
    try:
        return FrontMatter.model_validate(dict(data))
    except ValidationError as exc:
        raise FrontMatterError("invalid front matter", source, list(_describe_errors(exc))) from exc
