from flask import Blueprint, request

from models import storage
from models.team_member import TeamMember
from models.schemas.common import ReorderSchema
from models.schemas.team_member import TeamMemberInSchema, TeamMemberOutSchema
from utils.decorators import roles_required
from utils.exceptions import NotFound
from utils.ordering import apply_ordering
from utils.responses import success

bp = Blueprint("team", __name__)

member_in_schema = TeamMemberInSchema()
member_out_schema = TeamMemberOutSchema()
members_out_schema = TeamMemberOutSchema(many=True)
reorder_schema = ReorderSchema()


def _get_or_404(member_id):
    member = storage.get(TeamMember, member_id)
    if not member:
        raise NotFound("Team member not found")
    return member


@bp.get("/")
def list_members():
    """
    Team members in display order
    ---
    tags:
      - Team
    parameters:
      - in: query
        name: status
        type: string
        enum: [active, inactive, all]
        default: active
    responses:
      200:
        description: List of team members
    """
    status = request.args.get("status") or "active"
    query = storage.get_session().query(TeamMember)
    if status != "all":
        query = query.filter(TeamMember.status == status)
    rows = query.order_by(TeamMember.order.asc(), TeamMember.created_at.asc()).all()
    return success(members_out_schema.dump(rows))


@bp.get("/<member_id>")
def get_member(member_id):
    """
    One team member
    ---
    tags:
      - Team
    responses:
      200:
        description: Team member
      404:
        description: Team member not found
    """
    return success(member_out_schema.dump(_get_or_404(member_id)))


@bp.post("/")
@roles_required(["admin"])
def create_member():
    """
    Add a team member
    ---
    tags:
      - Team
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, role]
          properties:
            name: { type: string }
            role: { type: string }
            bio: { type: string }
            image: { type: string }
            linkedin: { type: string }
            twitter: { type: string }
            email: { type: string }
            order: { type: integer }
            status: { type: string, enum: [active, inactive] }
    responses:
      201:
        description: Created
      403:
        description: Insufficient permissions
    """
    data = member_in_schema.load(request.get_json(silent=True) or {})
    member = TeamMember(**data)
    storage.new(member)
    storage.save()
    return success(member_out_schema.dump(member), "Team member created successfully", 201)


@bp.put("/reorder")
@roles_required(["admin"])
def reorder_members():
    """
    Set display order
    ---
    tags:
      - Team
    security:
      - Bearer: []
    responses:
      200:
        description: Reordered
    """
    data = reorder_schema.load(request.get_json(silent=True) or {})
    apply_ordering(TeamMember, data["orders"])
    return success(message="Team members reordered successfully")


@bp.put("/<member_id>")
@roles_required(["admin"])
def update_member(member_id):
    """
    Update a team member (partial)
    ---
    tags:
      - Team
    security:
      - Bearer: []
    responses:
      200:
        description: Updated
      404:
        description: Team member not found
    """
    member = _get_or_404(member_id)
    data = member_in_schema.load(request.get_json(silent=True) or {}, partial=True)
    for key, value in data.items():
        setattr(member, key, value)
    member.save()
    return success(member_out_schema.dump(member), "Team member updated successfully")


@bp.delete("/<member_id>")
@roles_required(["admin"])
def delete_member(member_id):
    """
    Delete a team member
    ---
    tags:
      - Team
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Team member not found
    """
    member = _get_or_404(member_id)
    member.delete()
    storage.save()
    return success(message="Team member deleted successfully")
