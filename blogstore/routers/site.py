from fastapi import APIRouter, Depends

from blogstore.content.store import ContentStore
from blogstore.core.deps import get_content_store
from blogstore.core.site import get_saved_tweets, get_site_config
from blogstore.schemas.common import ResponseModel
from blogstore.schemas.site import SavedTweetsPayload, SiteConfig, SiteStats


router = APIRouter(prefix="/site", tags=["site"])


@router.get("/info", response_model=ResponseModel[SiteStats])
def get_site_info(store: ContentStore = Depends(get_content_store)):
    """获取站点统计信息"""
    documents = store.documents()
    latest = documents[0].date if documents else None

    return ResponseModel(
        code=200,
        data=SiteStats(
            articleCount=len(documents),
            tagCount=len(store.tags()),
            subscribersCount=get_site_config().subscribersCount,
            latestArticleDate=latest,
        )
    )


@router.get("/config", response_model=ResponseModel[SiteConfig])
def read_site_config():
    """获取站点配置"""
    return ResponseModel(code=200, data=get_site_config())


@router.get("/saved-tweets", response_model=ResponseModel[SavedTweetsPayload])
def read_saved_tweets():
    return ResponseModel(code=200, data=dict(get_saved_tweets()))
