"""
Shared pytest fixtures.

- ``content_dir``: a temporary content directory with three valid articles
- ``store``: a ContentStore built from it
- ``client``: a TestClient whose content store dependency points at it
"""

from pathlib import Path
from textwrap import dedent

import pytest
from fastapi.testclient import TestClient

from blogstore.content.store import ContentStore, clear_content_store_cache
from blogstore.core.deps import get_content_store
from blogstore.main import app


ARTICLES = {
    "redux-toolkit.md": """\
        ---
        title: How to use Redux Toolkit in React Native apps
        date: 2021-01-24
        slug: redux-toolkit-react-native
        thumbnail: '../thumbnails/redux.png'
        template: post
        tags:
          - react-native
          - redux
        ---

        Managing shared state with a slice and configureStore.
        """,
    "expo-fonts.md": """\
        ---
        title: Custom fonts in Expo
        date: 2020-07-20
        slug: expo-custom-fonts
        thumbnail: '../thumbnails/expo.png'
        template: post
        tags: [expo, react-native]
        ---

        Load fonts with expo-font before rendering the first screen.
        """,
    "nested/firebase-auth.md": """\
        ---
        title: Firebase authentication walkthrough
        date: 2020-03-02 09:30:00
        slug: /firebase-auth/
        thumbnail: '../thumbnails/firebase.png'
        template: post
        tags: firebase
        ---

        Sign users in with email and password.
        """,
}


def write_articles(directory: Path, articles: dict) -> Path:
    for name, text in articles.items():
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text), encoding="utf-8")
    return directory


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    return write_articles(tmp_path / "content", ARTICLES)


@pytest.fixture
def add_articles(content_dir: Path):
    """Write extra articles into the temporary content directory."""
    return lambda articles: write_articles(content_dir, articles)


@pytest.fixture
def store(content_dir: Path) -> ContentStore:
    return ContentStore.from_directory(content_dir)


@pytest.fixture(autouse=True)
def _reset_store_cache():
    clear_content_store_cache()
    yield
    clear_content_store_cache()


@pytest.fixture
def client(store: ContentStore):
    app.dependency_overrides[get_content_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
