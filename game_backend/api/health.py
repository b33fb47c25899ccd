# game_backend/api/health.py

from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from game_backend import db

bp = Blueprint('health', __name__)

# Bind key per schema; None is the default (account) bind.
SCHEMAS = {'account': None, 'game': 'game'}


@bp.route('/health', methods=['GET'])
def health_route():
    """
    Reports whether both schemas answer a trivial query.

    Response:
        200: Both schemas connected
        503: At least one schema unreachable
    """
    status = {}
    for name, bind_key in SCHEMAS.items():
        try:
            with db.engines[bind_key].connect() as conn:
                conn.execute(text('SELECT 1'))
            status[name] = 'connected'
        except SQLAlchemyError as e:
            current_app.logger.error(f"Health check: {name} schema unreachable: {str(e)}")
            status[name] = 'error'

    healthy = all(value == 'connected' for value in status.values())
    return jsonify({"success": healthy, "database": status}), 200 if healthy else 503
