"""
Site settings: one row, created with defaults on first read.
"""
import copy
import logging

from flask import Blueprint, request

from models import storage
from models.settings import Settings, DEFAULT_SETTINGS, JSON_GROUPS
from models.schemas.settings import SettingsInSchema, SettingsOutSchema
from utils.decorators import jwt_required
from utils.responses import success

logger = logging.getLogger(__name__)

bp = Blueprint("settings", __name__)

settings_in_schema = SettingsInSchema()
settings_out_schema = SettingsOutSchema()


def _create_defaults() -> Settings:
    settings = Settings(**copy.deepcopy(DEFAULT_SETTINGS))
    storage.new(settings)
    storage.save()
    return settings


def get_singleton() -> Settings:
    settings = storage.get_session().query(Settings).order_by(Settings.created_at.asc()).first()
    if settings is None:
        logger.info("No settings row found; creating defaults")
        settings = _create_defaults()
    return settings


@bp.get("/")
def get_settings():
    """
    Site settings
    ---
    tags:
      - Settings
    responses:
      200:
        description: The settings document
    """
    return success(settings_out_schema.dump(get_singleton()))


@bp.put("/")
@jwt_required()
def update_settings():
    """
    Update settings; nested groups are merged key by key
    ---
    tags:
      - Settings
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            siteName: { type: string }
            siteTagline: { type: string }
            siteDescription: { type: string }
            contactInfo: { type: object }
            socialLinks: { type: object }
            hero: { type: object }
            footer: { type: object }
            businessInfo: { type: object }
            seo: { type: object }
            tracking: { type: object }
            customCss: { type: string }
            customJs: { type: string }
            maintenanceMode: { type: boolean }
    responses:
      200:
        description: Settings updated successfully
    """
    data = settings_in_schema.load(request.get_json(silent=True) or {})
    settings = get_singleton()
    for key, value in data.items():
        if key in JSON_GROUPS:
            # new dict object so the JSON column is flagged dirty
            value = {**(getattr(settings, key) or {}), **value}
        setattr(settings, key, value)
    settings.save()
    return success(settings_out_schema.dump(settings), "Settings updated successfully")


@bp.post("/reset")
@jwt_required()
def reset_settings():
    """
    Restore the default settings
    ---
    tags:
      - Settings
    security:
      - Bearer: []
    responses:
      200:
        description: Settings reset to default
    """
    session = storage.get_session()
    session.query(Settings).delete()
    settings = _create_defaults()
    logger.info("Settings reset to defaults")
    return success(settings_out_schema.dump(settings), "Settings reset to default")
