# game_backend/api/auth.py
# (Login and registration routes.)

from flask import Blueprint
from game_backend.utils import read_json_body, get_string, _handle_service_result
from game_backend.services.users import login, register

bp = Blueprint('auth', __name__)


@bp.route('/login', methods=['POST'])
def login_route():
    """
    Verifies an id/password pair sent by the client.

    Body keys are matched case-insensitively; the password may be sent
    as 'pw' or 'password'.

    Response:
        200: Public user profile
        400: Malformed body
        401: Unknown id or wrong password (same body for both)
    """
    data = read_json_body()
    user_id = get_string(data, 'id')
    password = get_string(data, 'pw', 'password')

    result = login(user_id, password)
    return _handle_service_result(result)


@bp.route('/register', methods=['POST'])
def register_route():
    """Creates an account. 201 on success, 409 if the id is taken."""
    data = read_json_body()
    user_id = get_string(data, 'id')
    password = get_string(data, 'pw', 'password')
    name = get_string(data, 'name')

    result = register(user_id, password, name)
    return _handle_service_result(result, success_status=201)
