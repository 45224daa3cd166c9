"""Tests for the options pages exposed by the backend extension endpoint."""


async def test_list_options_pages(cms_client, backend) -> None:
    backend.documents["/api/ext/v1/options-pages"] = (200, [
        {"slug": "site-settings", "page_title": "Site Settings", "menu_title": "Settings", "icon_url": False, "parent_slug": None, "post_id": "options"},
        {"no_slug": True},
    ])

    pages = await cms_client.get_options_pages()

    assert [p.slug for p in pages] == ["site-settings"]
    assert pages[0].icon_url == ""
    assert pages[0].post_id == "options"


async def test_options_page_by_slug(cms_client, backend) -> None:
    backend.documents["/api/ext/v1/options-pages/site-settings"] = (200, {
        "slug": "site-settings",
        "page_title": "Site Settings",
        "post_id": "options",
        "acf": {"footer_text": "(c) Example"},
    })

    page = await cms_client.get_options_page_by_slug("site-settings")

    assert page.acf == {"footer_text": "(c) Example"}


async def test_missing_options_page_is_none(cms_client, backend) -> None:
    backend.documents["/api/ext/v1/options-pages/gone"] = (200, {"code": "not_found", "message": "Options page not found"})

    assert await cms_client.get_options_page_by_slug("gone") is None
    assert await cms_client.get_options_page_by_slug("never-existed") is None


async def test_options_page_slug_is_escaped(cms_client, backend) -> None:
    await cms_client.get_options_page_by_slug("a/b")

    assert backend.requests[0].url.raw_path.endswith(b"/options-pages/a%2Fb")
