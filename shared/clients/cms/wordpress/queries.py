"""Query documents sent to the WordPress query endpoint (WPGraphQL)."""

SEO_FIELDS = """
  seo {
    title
    metaDesc
    canonical
    opengraphTitle
    opengraphDescription
    opengraphUrl
    opengraphImage {
      sourceUrl
      width
      height
      altText
    }
    twitterTitle
    twitterDescription
    twitterImage {
      sourceUrl
      width
      height
      altText
    }
  }
"""

MEDIA_FIELDS = """
  databaseId
  sourceUrl
  altText
  title
  caption
  mimeType
  mediaDetails {
    width
    height
    file
    sizes {
      name
      sourceUrl
      width
      height
      mimeType
      file
    }
  }
"""

POST_FIELDS = f"""
  databaseId
  slug
  date
  dateGmt
  modified
  modifiedGmt
  status
  link
  title
  content
  excerpt
  commentStatus
  pingStatus
  isSticky
  author {{
    node {{
      databaseId
      name
      slug
      url
      description
      avatar {{
        url
      }}
    }}
  }}
  featuredImage {{
    node {{
      {MEDIA_FIELDS}
    }}
  }}
  categories {{
    nodes {{
      databaseId
      name
      slug
      description
      count
      parentDatabaseId
    }}
  }}
  tags {{
    nodes {{
      databaseId
      name
      slug
      description
      count
    }}
  }}
  {SEO_FIELDS}
"""

PAGE_FIELDS = """
  databaseId
  slug
  date
  dateGmt
  modified
  modifiedGmt
  status
  link
  title
  content
  menuOrder
  parentDatabaseId
  commentStatus
  author {
    node {
      databaseId
    }
  }
  featuredImage {
    node {
      databaseId
    }
  }
"""

CATEGORY_FIELDS = """
  databaseId
  name
  slug
  description
  count
  link
  parentDatabaseId
"""

TAG_FIELDS = """
  databaseId
  name
  slug
  description
  count
  link
"""

AUTHOR_FIELDS = """
  databaseId
  name
  slug
  url
  description
  link: url
  avatar {
    url
  }
"""

CONTENT_NODE_FIELDS = f"""
  databaseId
  slug
  date
  modified
  status
  link
  ... on NodeWithTitle {{
    title
  }}
  ... on NodeWithContentEditor {{
    content
  }}
  ... on NodeWithExcerpt {{
    excerpt
  }}
  ... on NodeWithFeaturedImage {{
    featuredImage {{
      node {{
        {MEDIA_FIELDS}
      }}
    }}
  }}
  ... on NodeWithAuthor {{
    author {{
      node {{
        databaseId
        name
        slug
        avatar {{
          url
        }}
      }}
    }}
  }}
  {SEO_FIELDS}
"""

QUERIES: dict[str, str] = {
    ################ POSTS ##################
    "posts": f"""
      query GetPosts($first: Int!, $after: String, $where: RootQueryToPostConnectionWhereArgs) {{
        posts(first: $first, after: $after, where: $where) {{
          pageInfo {{
            hasNextPage
            endCursor
          }}
          nodes {{
            {POST_FIELDS}
          }}
        }}
      }}
    """,
    # only ids, the number of nodes is the total (pageInfo.total is not available everywhere)
    "posts_count": """
      query GetPostsCount($first: Int!, $where: RootQueryToPostConnectionWhereArgs) {
        posts(first: $first, where: $where) {
          nodes {
            databaseId
          }
        }
      }
    """,
    "post_by_id": f"""
      query GetPostById($id: ID!) {{
        post(id: $id, idType: DATABASE_ID) {{
          {POST_FIELDS}
        }}
      }}
    """,
    "post_by_slug": f"""
      query GetPostBySlug($slug: ID!) {{
        post(id: $slug, idType: SLUG) {{
          {POST_FIELDS}
        }}
      }}
    """,
    "post_slugs": """
      query GetAllPostSlugs($first: Int!, $after: String) {
        posts(first: $first, after: $after) {
          pageInfo {
            hasNextPage
            endCursor
          }
          nodes {
            slug
          }
        }
      }
    """,
    "posts_sitemap": """
      query GetAllPostsSitemap($first: Int!, $after: String) {
        posts(first: $first, after: $after) {
          pageInfo {
            hasNextPage
            endCursor
          }
          nodes {
            slug
            modified
          }
        }
      }
    """,
    ################ TERMS ##################
    "categories": f"""
      query GetCategories($first: Int!, $where: RootQueryToCategoryConnectionWhereArgs) {{
        categories(first: $first, where: $where) {{
          nodes {{
            {CATEGORY_FIELDS}
          }}
        }}
      }}
    """,
    "category_by_id": f"""
      query GetCategoryById($id: ID!) {{
        category(id: $id, idType: DATABASE_ID) {{
          {CATEGORY_FIELDS}
        }}
      }}
    """,
    "category_by_slug": f"""
      query GetCategoryBySlug($slug: ID!) {{
        category(id: $slug, idType: SLUG) {{
          {CATEGORY_FIELDS}
        }}
      }}
    """,
    "tags": f"""
      query GetTags($first: Int!, $where: RootQueryToTagConnectionWhereArgs) {{
        tags(first: $first, where: $where) {{
          nodes {{
            {TAG_FIELDS}
          }}
        }}
      }}
    """,
    "tag_by_id": f"""
      query GetTagById($id: ID!) {{
        tag(id: $id, idType: DATABASE_ID) {{
          {TAG_FIELDS}
        }}
      }}
    """,
    "tag_by_slug": f"""
      query GetTagBySlug($slug: ID!) {{
        tag(id: $slug, idType: SLUG) {{
          {TAG_FIELDS}
        }}
      }}
    """,
    "tags_by_post": f"""
      query GetTagsByPost($id: ID!) {{
        post(id: $id, idType: DATABASE_ID) {{
          tags {{
            nodes {{
              {TAG_FIELDS}
            }}
          }}
        }}
      }}
    """,
    ################ AUTHORS ##################
    "authors": f"""
      query GetAuthors($first: Int!, $where: RootQueryToUserConnectionWhereArgs) {{
        users(first: $first, where: $where) {{
          nodes {{
            {AUTHOR_FIELDS}
          }}
        }}
      }}
    """,
    "author_by_id": f"""
      query GetAuthorById($id: ID!) {{
        user(id: $id, idType: DATABASE_ID) {{
          {AUTHOR_FIELDS}
        }}
      }}
    """,
    "author_by_slug": f"""
      query GetAuthorBySlug($slug: ID!) {{
        user(id: $slug, idType: SLUG) {{
          {AUTHOR_FIELDS}
        }}
      }}
    """,
    ################ PAGES ##################
    "pages": f"""
      query GetPages($first: Int!) {{
        pages(first: $first) {{
          nodes {{
            {PAGE_FIELDS}
          }}
        }}
      }}
    """,
    "page_by_id": f"""
      query GetPageById($id: ID!) {{
        page(id: $id, idType: DATABASE_ID) {{
          {PAGE_FIELDS}
          {SEO_FIELDS}
        }}
      }}
    """,
    "page_by_slug": f"""
      query GetPageBySlug($slug: ID!) {{
        page(id: $slug, idType: URI) {{
          {PAGE_FIELDS}
          {SEO_FIELDS}
        }}
      }}
    """,
    ################ MEDIA ##################
    "media_by_id": f"""
      query GetMediaById($id: ID!) {{
        mediaItem(id: $id, idType: DATABASE_ID) {{
          {MEDIA_FIELDS}
        }}
      }}
    """,
    ################ SCHEMA ##################
    "content_types": """
      query GetContentTypes {
        contentTypes(first: 100) {
          nodes {
            name
            graphqlSingleName
            graphqlPluralName
            label
            description
            hasArchive
          }
        }
      }
    """,
    "taxonomies": """
      query GetTaxonomies {
        taxonomies {
          nodes {
            name
            label
            connectedContentTypes {
              nodes {
                name
              }
            }
          }
        }
      }
    """,
    ########### CUSTOM CONTENT TYPES ###########
    "content_nodes": f"""
      query GetContentNodes($contentType: ContentTypeEnum!, $first: Int!, $after: String) {{
        contentNodes(where: {{ contentTypes: [$contentType] }}, first: $first, after: $after) {{
          pageInfo {{
            hasNextPage
            endCursor
          }}
          nodes {{
            {CONTENT_NODE_FIELDS}
          }}
        }}
      }}
    """,
    "content_nodes_count": """
      query GetContentNodesCount($contentType: ContentTypeEnum!, $first: Int!) {
        contentNodes(where: { contentTypes: [$contentType] }, first: $first) {
          nodes {
            databaseId
          }
        }
      }
    """,
    "content_node_by_slug": f"""
      query GetContentNodeBySlug($contentType: ContentTypeEnum!, $slug: String!) {{
        contentNodes(where: {{ contentTypes: [$contentType], name: $slug }}, first: 1) {{
          nodes {{
            {CONTENT_NODE_FIELDS}
          }}
        }}
      }}
    """,
    "content_node_slugs": """
      query GetContentNodeSlugs($contentType: ContentTypeEnum!, $first: Int!, $after: String) {
        contentNodes(where: { contentTypes: [$contentType] }, first: $first, after: $after) {
          pageInfo {
            hasNextPage
            endCursor
          }
          nodes {
            slug
          }
        }
      }
    """,
}
