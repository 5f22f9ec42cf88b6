from __future__ import annotations

from collections import Counter

from flask import Blueprint, request, g
from sqlalchemy import cast, String, func

from models import storage
from models.base_model import utcnow
from models.blog import Blog, BlogStatus
from models.schemas.blog import BlogInSchema, BlogOutSchema, BlogSummarySchema
from models.schemas.common import SEOSchema
from utils.decorators import jwt_required
from utils.exceptions import Conflict, NotFound
from utils.pagination import parse_pagination, build_search_filter, paginate
from utils.responses import success
from utils.text import generate_unique_slug

bp = Blueprint("blog", __name__)

# Schemas
blog_in_schema = BlogInSchema()
blog_out_schema = BlogOutSchema()
blogs_out_schema = BlogSummarySchema(many=True)
seo_schema = SEOSchema()

# Sorting allowlist: API field -> SQLAlchemy column
SORT_COLUMNS = {
    "publishDate": Blog.publish_date,
    "createdAt": Blog.created_at,
    "updatedAt": Blog.updated_at,
    "title": Blog.title,
    "viewCount": Blog.view_count,
}

MAX_TAGS = 50
DUPLICATE_SLUG = "A post with this slug already exists"


def _slug_exists(slug: str, exclude_id: str | None = None) -> bool:
    query = storage.get_session().query(Blog.id).filter(Blog.slug == slug)
    if exclude_id:
        query = query.filter(Blog.id != exclude_id)
    return query.first() is not None


def _get_or_404(blog_id: str) -> Blog:
    post = storage.get(Blog, blog_id)
    if not post:
        raise NotFound("Blog post not found")
    return post


def _published():
    return storage.get_session().query(Blog).filter(Blog.status == BlogStatus.PUBLISHED)


def _tag_filter(tag: str):
    # tags is a JSON array of strings
    return cast(Blog.tags, String).like(f'%"{tag.strip().lower()}"%')


@bp.get("/")
def list_posts():
    """
    Published posts (publishDate reached), paginated
    ---
    tags:
      - Blog
    parameters:
      - in: query
        name: page
        type: integer
        default: 1
      - in: query
        name: limit
        type: integer
        default: 10
      - in: query
        name: sortBy
        type: string
        description: "publishDate, createdAt, updatedAt, title, viewCount"
        default: publishDate
      - in: query
        name: sortOrder
        type: string
        enum: [asc, desc]
      - in: query
        name: category
        type: string
      - in: query
        name: tag
        type: string
      - in: query
        name: search
        type: string
    responses:
      200:
        description: List of posts
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="publishDate")
    query = _published().filter(Blog.publish_date <= utcnow())
    search = build_search_filter(params.search, [Blog.title, Blog.excerpt, Blog.category])
    if search is not None:
        query = query.filter(search)
    if request.args.get("category"):
        query = query.filter(Blog.category == request.args["category"])
    if request.args.get("tag"):
        query = query.filter(_tag_filter(request.args["tag"]))
    rows, pagination = paginate(query, params)
    return success(blogs_out_schema.dump(rows), pagination=pagination)


@bp.get("/categories")
def categories():
    """
    Published post count per category
    ---
    tags:
      - Blog
    responses:
      200:
        description: "[{name, count}]"
    """
    rows = (
        storage.get_session()
        .query(Blog.category, func.count(Blog.id))
        .filter(Blog.status == BlogStatus.PUBLISHED)
        .group_by(Blog.category)
        .all()
    )
    data = sorted(({"name": name, "count": count} for name, count in rows), key=lambda c: -c["count"])
    return success(data)


@bp.get("/tags")
def tags():
    """
    Most used tags on published posts (top 50)
    ---
    tags:
      - Blog
    responses:
      200:
        description: "[{name, count}]"
    """
    counter = Counter()
    for (post_tags,) in storage.get_session().query(Blog.tags).filter(Blog.status == BlogStatus.PUBLISHED):
        counter.update(post_tags or [])
    return success([{"name": name, "count": count} for name, count in counter.most_common(MAX_TAGS)])


@bp.get("/admin/all")
@jwt_required()
def admin_list():
    """
    All posts regardless of status
    ---
    tags:
      - Blog
    security:
      - Bearer: []
    parameters:
      - in: query
        name: status
        type: string
        enum: [draft, published, archived]
      - in: query
        name: category
        type: string
      - in: query
        name: search
        type: string
    responses:
      200:
        description: List of posts
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="createdAt")
    query = storage.get_session().query(Blog)
    search = build_search_filter(params.search, [Blog.title, Blog.slug, Blog.excerpt, Blog.category])
    if search is not None:
        query = query.filter(search)
    status = request.args.get("status")
    if status in [s.value for s in BlogStatus]:
        query = query.filter(Blog.status == BlogStatus(status))
    if request.args.get("category"):
        query = query.filter(Blog.category == request.args["category"])
    rows, pagination = paginate(query, params)
    return success(blogs_out_schema.dump(rows), pagination=pagination)


@bp.get("/admin/<blog_id>")
@jwt_required()
def admin_get(blog_id):
    """
    One post by id, any status
    ---
    tags:
      - Blog
    security:
      - Bearer: []
    responses:
      200:
        description: Post
      404:
        description: Blog post not found
    """
    return success(blog_out_schema.dump(_get_or_404(blog_id)))


@bp.get("/<slug>")
def get_by_slug(slug):
    """
    Published post by slug; counts a view
    ---
    tags:
      - Blog
    parameters:
      - in: path
        name: slug
        type: string
        required: true
    responses:
      200:
        description: Post
      404:
        description: Blog post not found
    """
    post = _published().filter(Blog.slug == slug).first()
    if not post:
        raise NotFound("Blog post not found")
    storage.get_session().query(Blog).filter(Blog.id == post.id).update(
        {Blog.view_count: Blog.view_count + 1}, synchronize_session=False
    )
    storage.save()
    data = blog_out_schema.dump(post)
    data["viewCount"] = (post.view_count or 0) + 1
    return success(data)


@bp.post("/")
@jwt_required()
def create_post():
    """
    Create a post (slug generated from the title when omitted)
    ---
    tags:
      - Blog
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, content]
          properties:
            title: { type: string, maxLength: 200 }
            slug: { type: string }
            excerpt: { type: string, maxLength: 300 }
            content: { type: string }
            featuredImage: { type: string }
            category: { type: string }
            tags: { type: array, items: { type: string } }
            status: { type: string, enum: [draft, published, archived] }
            publishDate: { type: string, format: date-time }
            featured: { type: boolean }
            seo: { type: object }
    responses:
      201:
        description: Created
      400:
        description: Validation error or duplicate slug
    """
    data = blog_in_schema.load(request.get_json(silent=True) or {})
    if data.get("slug"):
        if _slug_exists(data["slug"]):
            raise Conflict(DUPLICATE_SLUG)
    else:
        data["slug"] = generate_unique_slug(data["title"], _slug_exists)
    data["seo"] = seo_schema.dump(data.get("seo") or {})

    post = Blog(**data, author_id=g.current_admin.id)
    post.apply_publishing_rules()
    storage.new(post)
    storage.save()
    return success(blog_out_schema.dump(post), "Blog post created successfully", 201)


@bp.put("/<blog_id>")
@jwt_required()
def update_post(blog_id):
    """
    Update a post (partial)
    ---
    tags:
      - Blog
    security:
      - Bearer: []
    parameters:
      - in: path
        name: blog_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: Updated
      400:
        description: Validation error or duplicate slug
      404:
        description: Blog post not found
    """
    post = _get_or_404(blog_id)
    data = blog_in_schema.load(request.get_json(silent=True) or {}, partial=True)
    slug = data.pop("slug", None)
    if slug and slug != post.slug:
        if _slug_exists(slug, exclude_id=post.id):
            raise Conflict(DUPLICATE_SLUG)
        post.slug = slug
    if "seo" in data:
        data["seo"] = seo_schema.dump(data["seo"] or {})
    for key, value in data.items():
        setattr(post, key, value)
    post.apply_publishing_rules()
    post.save()
    return success(blog_out_schema.dump(post), "Blog post updated successfully")


@bp.delete("/<blog_id>")
@jwt_required()
def delete_post(blog_id):
    """
    Delete a post
    ---
    tags:
      - Blog
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Blog post not found
    """
    post = _get_or_404(blog_id)
    post.delete()
    storage.save()
    return success(message="Blog post deleted successfully")
