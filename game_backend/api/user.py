# game_backend/api/user.py
# (Progression save routes.)

from flask import Blueprint
from game_backend.errors import MalformedRequest
from game_backend.utils import read_json_body, get_int, get_string, _handle_service_result
from game_backend.services.users import replace_progress, update_progress, PROGRESS_FIELDS

bp = Blueprint('user', __name__)


def _read_uid(data):
    uid = get_int(data, 'uid')
    if uid <= 0:
        raise MalformedRequest()
    return uid


def _read_stage_code(data):
    value = data.get('clearedstagecode')
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str):
        raise MalformedRequest()
    return get_string(data, 'clearedStageCode')


@bp.route('/progress', methods=['POST', 'PUT'])
def save_progress_route():
    """
    Replaces the user's saved progression.

    The client sends its whole profile; level, hp, atk and exp are all
    required and clearedStageCode may be omitted (stored as null).

    Response:
        200: Saved
        400: Malformed body, missing stat or uid <= 0
        404: No user with that uid
    """
    data = read_json_body()
    uid = _read_uid(data)
    stats = {field: get_int(data, field) for field in PROGRESS_FIELDS}
    cleared_stage_code = _read_stage_code(data)

    result = replace_progress(uid, cleared_stage_code=cleared_stage_code, **stats)
    return _handle_service_result(result)


@bp.route('/progress', methods=['PATCH'])
def patch_progress_route():
    """Writes only the progression fields present in the body."""
    data = read_json_body()
    uid = _read_uid(data)

    changes = {}
    for field in PROGRESS_FIELDS:
        value = get_int(data, field, required=False)
        if value is not None:
            changes[field] = value
    if 'clearedstagecode' in data:
        changes['clearedStageCode'] = _read_stage_code(data)

    result = update_progress(uid, changes)
    return _handle_service_result(result)
