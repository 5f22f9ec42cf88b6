from flask import Blueprint, request, g

from models import storage
from models.client import Client
from models.schemas.client import ClientInSchema, ClientOutSchema
from models.schemas.common import ReorderSchema
from utils.decorators import jwt_required, jwt_optional
from utils.exceptions import NotFound
from utils.ordering import apply_ordering
from utils.pagination import bool_arg
from utils.responses import success

bp = Blueprint("clients", __name__)

client_in_schema = ClientInSchema()
client_out_schema = ClientOutSchema()
clients_out_schema = ClientOutSchema(many=True)
reorder_schema = ReorderSchema()


def _get_or_404(client_id):
    client = storage.get(Client, client_id)
    if not client:
        raise NotFound("Client not found")
    return client


@bp.get("/")
@jwt_optional()
def list_clients():
    """
    Client logos in display order; anonymous callers only see active ones
    ---
    tags:
      - Clients
    parameters:
      - in: query
        name: status
        type: string
        enum: [active, inactive]
        description: Honoured for authenticated admins only
      - in: query
        name: featured
        type: boolean
    responses:
      200:
        description: List of clients
    """
    query = storage.get_session().query(Client)
    if g.current_admin is None:
        query = query.filter(Client.status == "active")
    elif request.args.get("status"):
        query = query.filter(Client.status == request.args["status"])
    if bool_arg("featured"):
        query = query.filter(Client.featured.is_(True))
    rows = query.order_by(Client.order.asc(), Client.created_at.desc()).all()
    return success(clients_out_schema.dump(rows))


@bp.get("/<client_id>")
def get_client(client_id):
    """
    One client
    ---
    tags:
      - Clients
    responses:
      200:
        description: Client
      404:
        description: Client not found
    """
    return success(client_out_schema.dump(_get_or_404(client_id)))


@bp.post("/")
@jwt_required()
def create_client():
    """
    Add a client
    ---
    tags:
      - Clients
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, logo]
          properties:
            name: { type: string }
            logo: { type: string }
            logoDark: { type: string }
            website: { type: string }
            industry: { type: string }
            featured: { type: boolean }
            status: { type: string, enum: [active, inactive] }
            order: { type: integer }
    responses:
      201:
        description: Created
    """
    data = client_in_schema.load(request.get_json(silent=True) or {})
    client = Client(**data)
    storage.new(client)
    storage.save()
    return success(client_out_schema.dump(client), "Client created successfully", 201)


@bp.put("/reorder")
@jwt_required()
def reorder_clients():
    """
    Set display order
    ---
    tags:
      - Clients
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            orders:
              type: array
              items:
                type: object
                properties:
                  id: { type: string }
                  order: { type: integer }
    responses:
      200:
        description: Reordered
    """
    data = reorder_schema.load(request.get_json(silent=True) or {})
    apply_ordering(Client, data["orders"])
    return success(message="Clients reordered successfully")


@bp.put("/<client_id>")
@jwt_required()
def update_client(client_id):
    """
    Update a client (partial)
    ---
    tags:
      - Clients
    security:
      - Bearer: []
    responses:
      200:
        description: Updated
      404:
        description: Client not found
    """
    client = _get_or_404(client_id)
    data = client_in_schema.load(request.get_json(silent=True) or {}, partial=True)
    for key, value in data.items():
        setattr(client, key, value)
    client.save()
    return success(client_out_schema.dump(client), "Client updated successfully")


@bp.delete("/<client_id>")
@jwt_required()
def delete_client(client_id):
    """
    Delete a client
    ---
    tags:
      - Clients
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Client not found
    """
    client = _get_or_404(client_id)
    client.delete()
    storage.save()
    return success(message="Client deleted successfully")
