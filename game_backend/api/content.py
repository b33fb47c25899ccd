# game_backend/api/content.py
# (Reference data lookups: stages, monsters, cards, levels.)

from flask import Blueprint
from game_backend.errors import MalformedRequest
from game_backend.utils import require_path_param, _handle_service_result
from game_backend.utils.general import INT_MIN, INT_MAX
from game_backend.services.content import get_stage, get_monster, get_card, get_level

bp = Blueprint('content', __name__)

# Each lookup also answers its bare prefix so a missing code is a 400
# instead of a routing 404.


@bp.route('/stage/', defaults={'stage_code': None}, methods=['GET'], strict_slashes=False)
@bp.route('/stage/<stage_code>', methods=['GET'])
def get_stage_route(stage_code):
    result = get_stage(require_path_param(stage_code))
    return _handle_service_result(result)


@bp.route('/monster/', defaults={'monster_code': None}, methods=['GET'], strict_slashes=False)
@bp.route('/monster/<monster_code>', methods=['GET'])
def get_monster_route(monster_code):
    result = get_monster(require_path_param(monster_code))
    return _handle_service_result(result)


@bp.route('/card/', defaults={'card_code': None}, methods=['GET'], strict_slashes=False)
@bp.route('/card/<card_code>', methods=['GET'])
def get_card_route(card_code):
    result = get_card(require_path_param(card_code))
    return _handle_service_result(result)


@bp.route('/level/', defaults={'level_value': None}, methods=['GET'], strict_slashes=False)
@bp.route('/level/<level_value>', methods=['GET'])
def get_level_route(level_value):
    """Level values are integers; anything else is a malformed request."""
    raw = require_path_param(level_value)
    try:
        value = int(raw)
    except ValueError:
        raise MalformedRequest() from None
    if not INT_MIN <= value <= INT_MAX:
        raise MalformedRequest()

    result = get_level(value)
    return _handle_service_result(result)
