"""Media library: uploads on disk, metadata in the `media` table. Admin only."""
from flask import Blueprint, request
from flask_limiter.util import get_remote_address

from api.limits import limiter, upload_limit
from models import storage
from models.media import Media
from models.schemas.media import MediaUpdateSchema, MediaOutSchema
from services import uploads
from utils.decorators import jwt_required, current_admin_id
from utils.exceptions import NotFound
from utils.pagination import parse_pagination, paginate, build_search_filter
from utils.responses import success

bp = Blueprint("media", __name__)

media_update_schema = MediaUpdateSchema()
media_out_schema = MediaOutSchema()
media_list_schema = MediaOutSchema(many=True)

SORT_COLUMNS = {
    "createdAt": Media.created_at,
    "size": Media.size,
    "originalName": Media.original_name,
    "mimeType": Media.mime_type,
}


def _get_or_404(media_id):
    media = storage.get(Media, media_id)
    if not media:
        raise NotFound("Media not found")
    return media


@bp.post("/")
@jwt_required()
@limiter.limit(upload_limit, key_func=get_remote_address,
               error_message="Upload limit reached. Please try again later.")
def upload_media():
    """
    Upload a file
    ---
    tags:
      - Media
    security:
      - Bearer: []
    consumes:
      - multipart/form-data
    parameters:
      - in: formData
        name: file
        type: file
        required: true
      - in: formData
        name: folder
        type: string
        default: general
      - in: formData
        name: alt
        type: string
      - in: formData
        name: caption
        type: string
    responses:
      201:
        description: File uploaded successfully
      400:
        description: Missing, disallowed or oversized file
      429:
        description: Upload limit reached
    """
    media = uploads.save_upload(
        request.files.get("file"),
        folder=(request.form.get("folder") or "general").strip(),
        alt=request.form.get("alt", ""),
        caption=request.form.get("caption", ""),
        uploaded_by=current_admin_id(),
    )
    return success(media_out_schema.dump(media), "File uploaded successfully", 201)


@bp.get("/")
@jwt_required()
def list_media():
    """
    Media library, newest first
    ---
    tags:
      - Media
    security:
      - Bearer: []
    parameters:
      - in: query
        name: folder
        type: string
      - in: query
        name: mimeType
        type: string
        description: Substring match, e.g. "image"
      - in: query
        name: search
        type: string
        description: Matches original name, alt text or caption
      - in: query
        name: page
        type: integer
      - in: query
        name: limit
        type: integer
        default: 30
    responses:
      200:
        description: Paginated media
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="createdAt", default_limit=30)
    query = storage.get_session().query(Media)

    if request.args.get("folder"):
        query = query.filter(Media.folder == request.args["folder"])
    mime = build_search_filter(request.args.get("mimeType", "").strip(), [Media.mime_type])
    if mime is not None:
        query = query.filter(mime)
    search = build_search_filter(params.search, [Media.original_name, Media.alt, Media.caption])
    if search is not None:
        query = query.filter(search)

    rows, pagination = paginate(query, params)
    return success(media_list_schema.dump(rows), pagination=pagination)


@bp.get("/stats")
@jwt_required()
def stats():
    """
    Counts and total size per MIME type
    ---
    tags:
      - Media
    security:
      - Bearer: []
    responses:
      200:
        description: Media statistics
    """
    return success(uploads.media_stats())


@bp.get("/folders")
@jwt_required()
def list_folders():
    """
    Distinct folder names
    ---
    tags:
      - Media
    security:
      - Bearer: []
    responses:
      200:
        description: Folder names
    """
    return success(uploads.folders())


@bp.get("/<media_id>")
@jwt_required()
def get_media(media_id):
    """
    One media item
    ---
    tags:
      - Media
    security:
      - Bearer: []
    responses:
      200:
        description: Media item
      404:
        description: Media not found
    """
    return success(media_out_schema.dump(_get_or_404(media_id)))


@bp.put("/<media_id>")
@jwt_required()
def update_media(media_id):
    """
    Update alt text, caption, folder or tags
    ---
    tags:
      - Media
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            alt: { type: string }
            caption: { type: string }
            folder: { type: string }
            tags: { type: array, items: { type: string } }
            isPublic: { type: boolean }
    responses:
      200:
        description: Media updated successfully
      404:
        description: Media not found
    """
    media = _get_or_404(media_id)
    data = media_update_schema.load(request.get_json(silent=True) or {})
    for key, value in data.items():
        setattr(media, key, value)
    media.save()
    return success(media_out_schema.dump(media), "Media updated successfully")


@bp.delete("/<media_id>")
@jwt_required()
def delete_media(media_id):
    """
    Delete a media item and its file
    ---
    tags:
      - Media
    security:
      - Bearer: []
    responses:
      200:
        description: Media deleted successfully
      404:
        description: Media not found
    """
    uploads.delete_media(_get_or_404(media_id))
    return success(message="Media deleted successfully")
