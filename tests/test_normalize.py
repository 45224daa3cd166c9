"""Tests for mapping raw query API nodes onto the entity model."""

import pytest

from shared.clients.cms.models.ContentEntity import ContentNode, Page, Post
from shared.clients.cms.wordpress.CMSClientWordpress import CMSClientWordpress


@pytest.fixture
def wordpress(helper_config) -> CMSClientWordpress:
    return CMSClientWordpress(helper_config=helper_config)


@pytest.mark.parametrize("raw", [{}, None, [], "garbage"])
def test_empty_post_gets_defaults(wordpress: CMSClientWordpress, raw) -> None:
    post = wordpress.normalize(raw, "post")

    assert isinstance(post, Post)
    assert post.id == 0
    assert post.slug == ""
    assert post.status == "publish"
    assert post.comment_status == "closed"
    assert post.ping_status == "closed"
    assert post.categories == []
    assert post.tags == []
    assert post.excerpt is None
    assert post.custom_fields is None
    assert post.seo is None


def test_post_is_unwrapped(wordpress: CMSClientWordpress) -> None:
    raw = {
        "databaseId": 42,
        "slug": "hello-world",
        "date": "2024-05-01T10:00:00",
        "status": "DRAFT",
        "title": "Hello",
        "commentStatus": "OPEN",
        "isSticky": True,
        "author": {"node": {"databaseId": 3, "name": "Ada", "slug": "ada", "avatar": {"url": "https://x/a.png"}}},
        "featuredImage": {"node": {"databaseId": 9, "sourceUrl": "https://x/i.jpg", "mediaDetails": {"width": 800, "sizes": [{"name": "thumb", "width": "150"}, None]}}},
        "categories": {"nodes": [{"databaseId": 1, "name": "News", "slug": "news"}, None, {"name": "no id"}]},
        "tags": {"nodes": [{"databaseId": 5}]},
        "seo": {"title": "SEO", "metaDesc": "desc", "opengraphImage": {"sourceUrl": "https://x/og.jpg", "width": 1200}},
    }

    post = wordpress.normalize(raw, "post")

    assert post.id == 42
    assert post.status == "draft"
    assert post.date_gmt == "2024-05-01T10:00:00"
    assert post.comment_status == "open"
    assert post.sticky is True
    assert post.author == 3
    assert post.featured_media == 9
    assert post.categories == [1]
    assert post.tags == [5]
    assert post.embedded_author.avatar_urls == {"96": "https://x/a.png"}
    assert post.embedded_media.width == 800
    assert post.embedded_media.sizes["thumb"].width == 150
    assert [c.slug for c in post.embedded_categories] == ["news", ""]
    assert post.seo.description == "desc"
    assert post.seo.opengraph_image.url == "https://x/og.jpg"
    assert post.seo.twitter_image is None


def test_unknown_status_falls_back_to_publish(wordpress: CMSClientWordpress) -> None:
    assert wordpress.normalize({"status": "TRASH"}, "post").status == "publish"


def test_page_defaults(wordpress: CMSClientWordpress) -> None:
    page = wordpress.normalize({"databaseId": 2, "menuOrder": 4, "parentDatabaseId": None}, "page")

    assert isinstance(page, Page)
    assert page.menu_order == 4
    assert page.parent == 0
    assert page.content_type == "page"


def test_content_node_keeps_unsupported_fields_absent(wordpress: CMSClientWordpress) -> None:
    node = wordpress.normalize({"databaseId": 12, "slug": "first-guide", "title": "First"}, "guide")

    assert isinstance(node, ContentNode)
    assert node.content_type == "guide"
    assert node.title == "First"
    assert node.content is None
    assert node.author is None
    assert node.featured_media is None
