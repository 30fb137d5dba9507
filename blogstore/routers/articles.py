from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query

from blogstore.content.errors import DocumentNotFoundError
from blogstore.content.store import ContentStore
from blogstore.core.deps import get_content_store
from blogstore.schemas.article import ArticleDetail, ArticleListItem, TagCount
from blogstore.schemas.common import ResponseModel, PagedData


router = APIRouter(prefix="/articles", tags=["articles"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ResponseModel[PagedData[ArticleListItem]])
def get_articles(
    current: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    tag: Optional[str] = None,
    keyword: Optional[str] = None,
    store: ContentStore = Depends(get_content_store),
):
    """获取文章列表 (最新在前)"""
    documents = store.documents()

    # Filter by tag
    if tag:
        documents = [doc for doc in documents if tag in doc.tags]

    # Search by keyword
    if keyword:
        matches = {doc.slug for doc in store.search(keyword)}
        documents = [doc for doc in documents if doc.slug in matches]

    total = len(documents)
    page = documents[(current - 1) * size:current * size]

    return ResponseModel(
        code=200,
        data=PagedData(
            records=[ArticleListItem.from_document(doc) for doc in page],
            total=total,
            current=current,
            size=size
        )
    )


@router.get("/tags", response_model=ResponseModel[List[TagCount]])
def get_tags(store: ContentStore = Depends(get_content_store)):
    """获取标签及文章数"""
    return ResponseModel(
        code=200,
        data=[TagCount(name=name, count=count) for name, count in store.tags().items()]
    )


@router.get("/{slug}", response_model=ResponseModel[ArticleDetail])
def get_article(slug: str, store: ContentStore = Depends(get_content_store)):
    """获取文章详情"""
    try:
        document = store.get(slug)
    except DocumentNotFoundError:
        logger.warning("Article %s not found", slug)
        return ResponseModel.error(404, "Article not found")

    return ResponseModel(code=200, data=ArticleDetail.from_document(document))
