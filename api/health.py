from datetime import datetime, timezone

from flask import Blueprint, current_app

from .limits import limiter

bp = Blueprint("health", __name__)


@bp.get("/health")
@limiter.exempt
def health():
    """
    Health check
    ---
    tags:
      - Health
    responses:
      200:
        description: API is up
        schema:
          type: object
          properties:
            success: { type: boolean, example: true }
            status: { type: string, example: ok }
            timestamp: { type: string, format: date-time }
            environment: { type: string, example: dev }
            version: { type: string, example: 2.0.0 }
    """
    return {
        "success": True,
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": current_app.config["APP_ENV"],
        "version": "2.0.0",
    }, 200
