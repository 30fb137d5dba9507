"""
Site configuration and saved reference links.

Both values are built once when this module is imported and are never
mutated afterwards; every caller gets the same objects back.
"""
from types import MappingProxyType
from typing import Mapping

from blogstore.schemas.site import SiteConfig


SITE_CONFIG = SiteConfig(
    siteTitle='Aman Mittal',
    siteUrl='https://amanhimself.dev',
    description='Software engineer and technical content writer.',
    username='Alec Campbell',
    shortname='@fu4303',
    newsletter='https://amanhimself.substack.com/',
    github='https://github.com/fu4303',
    twitter='https://twitter.com/fu4303',
    medium='https://medium.com/@amanhimself',
    devto='https://dev.to/fu4303',
    hashnode='https://hashnode.com/@fu4303',
    instagram='https://www.instagram.com/amanhimselfcodes/',
    hundredDaysOfCodeBot='https://twitter.com/_100Daysofcode',
    mailAddress='mailto:amanmittal.work@gmail.com',
    kofi='https://ko-fi.com/amanhimself',
    twitterBotRepo='https://github.com/freeCodeCamp/100DaysOfCode-twitter-bot',
    goodreads='https://www.goodreads.com/author/show/17657541.Aman_Mittal',
    subscribersCount='1200+',
)

SAVED_TWEETS: Mapping[str, str] = MappingProxyType({
    'twoMillionViews': 'https://twitter.com/amanhimself/status/1285554115464982528',
    'topContributorFreeCodeCamp2018': (
        'https://www.freecodecamp.org/news/'
        'announcing-our-freecodecamp-2018-top-contributor-award-winners-861da08a77e1/'
    ),
})


def get_site_config() -> SiteConfig:
    """获取站点配置"""
    return SITE_CONFIG


def get_saved_tweets() -> Mapping[str, str]:
    return SAVED_TWEETS
