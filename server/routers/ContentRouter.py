from fastapi import APIRouter, Query, Request

from shared.clients.cms.CMSClientInterface import CMSClientInterface
from shared.clients.cms.models.Author import Author
from shared.clients.cms.models.ContentEntity import ContentNode, Page, Post
from shared.clients.cms.models.ContentType import ContentTypeDescriptor
from shared.clients.cms.models.Media import FeaturedMedia
from shared.clients.cms.models.OptionsPage import OptionsPageData, OptionsPageInfo
from shared.clients.cms.models.Pagination import PaginatedResult, SlugEntry
from shared.clients.cms.models.Taxonomy import Category, CustomTaxonomyDescriptor, Tag
from shared.models.errors import NotFoundError

router = APIRouter(prefix="/api", tags=["content"])


def _client(request: Request) -> CMSClientInterface:
    return request.app.state.cms_client


async def _descriptor(client: CMSClientInterface, name: str) -> ContentTypeDescriptor:
    descriptor = await client.get_content_type_by_slug(name)
    if descriptor is None:
        raise NotFoundError("content type", name)
    return descriptor


################ POSTS ##################
@router.get("/posts")
async def list_posts(
    request: Request,
    page: int = Query(1, ge=1),
    per_page: int = Query(9, ge=1, le=100),
    author: int | None = Query(None, ge=1),
    tag: str | None = None,
    category: int | None = Query(None, ge=1),
    search: str | None = None,
) -> PaginatedResult[Post]:
    """One page of posts with the collection's totals. Empty when the backend is unavailable."""
    return await _client(request).get_posts_paginated(page, per_page, author=author, tag=tag, category=category, search=search)


@router.get("/posts/slugs")
async def list_post_slugs(request: Request) -> list[SlugEntry]:
    return await _client(request).get_all_post_slugs()


@router.get("/posts/sitemap")
async def list_posts_for_sitemap(request: Request) -> list[SlugEntry]:
    return await _client(request).get_all_posts_for_sitemap()


@router.get("/posts/{slug}")
async def get_post(request: Request, slug: str) -> Post:
    post = await _client(request).get_post_by_slug(slug)
    if post is None:
        raise NotFoundError("post", slug)
    return post


################ PAGES ##################
@router.get("/pages")
async def list_pages(request: Request) -> list[Page]:
    return await _client(request).get_all_pages()


@router.get("/pages/{slug}")
async def get_page(request: Request, slug: str) -> Page:
    page = await _client(request).get_page_by_slug(slug)
    if page is None:
        raise NotFoundError("page", slug)
    return page


################ TERMS & AUTHORS ##################
@router.get("/categories")
async def list_categories(request: Request, search: str | None = None) -> list[Category]:
    client = _client(request)
    return await client.search_categories(search) if search else await client.get_all_categories()


@router.get("/categories/{slug}")
async def get_category(request: Request, slug: str) -> Category:
    return await _client(request).get_category_by_slug(slug)


@router.get("/tags")
async def list_tags(request: Request, search: str | None = None) -> list[Tag]:
    client = _client(request)
    return await client.search_tags(search) if search else await client.get_all_tags()


@router.get("/tags/{slug}")
async def get_tag(request: Request, slug: str) -> Tag:
    return await _client(request).get_tag_by_slug(slug)


@router.get("/authors")
async def list_authors(request: Request, search: str | None = None) -> list[Author]:
    client = _client(request)
    return await client.search_authors(search) if search else await client.get_all_authors()


@router.get("/authors/{slug}")
async def get_author(request: Request, slug: str) -> Author:
    return await _client(request).get_author_by_slug(slug)


@router.get("/media/{media_id}")
async def get_media(request: Request, media_id: int) -> FeaturedMedia:
    return await _client(request).get_featured_media_by_id(media_id)


########### CUSTOM CONTENT TYPES ###########
@router.get("/content-types")
async def list_content_types(request: Request) -> list[ContentTypeDescriptor]:
    return await _client(request).list_custom_content_types()


@router.get("/taxonomies")
async def list_taxonomies(request: Request) -> list[CustomTaxonomyDescriptor]:
    return await _client(request).list_custom_taxonomies()


@router.get("/content-types/{name}/items")
async def list_content_nodes(
    request: Request,
    name: str,
    page: int = Query(1, ge=1),
    per_page: int = Query(9, ge=1, le=100),
) -> PaginatedResult[ContentNode]:
    client = _client(request)
    descriptor = await _descriptor(client, name)
    return await client.get_content_nodes_paginated(descriptor, page, per_page)


@router.get("/content-types/{name}/slugs")
async def list_content_node_slugs(request: Request, name: str) -> list[SlugEntry]:
    client = _client(request)
    descriptor = await _descriptor(client, name)
    return await client.get_all_content_node_slugs(descriptor)


@router.get("/content-types/{name}/items/{slug}")
async def get_content_node(request: Request, name: str, slug: str) -> ContentNode:
    client = _client(request)
    descriptor = await _descriptor(client, name)
    node = await client.get_content_node_by_slug(descriptor, slug)
    if node is None:
        raise NotFoundError(name, slug)
    return node


############### OPTIONS PAGES ###############
@router.get("/options-pages")
async def list_options_pages(request: Request) -> list[OptionsPageInfo]:
    return await _client(request).get_options_pages()


@router.get("/options-pages/{slug}")
async def get_options_page(request: Request, slug: str) -> OptionsPageData:
    options_page = await _client(request).get_options_page_by_slug(slug)
    if options_page is None:
        raise NotFoundError("options page", slug)
    return options_page
