# game_backend/services/users.py
# Account services: login, registration and progression saves.

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from game_backend import db
from game_backend.models import UserInfo
from game_backend.credentials import hash_password, verify_password
from game_backend.errors import Unauthenticated, Conflict, NotFound, StoreFailure, MalformedRequest

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_KEY = 1062

PROGRESS_FIELDS = ('level', 'hp', 'atk', 'exp')


def _is_duplicate_key(error):
    """True when an IntegrityError is a unique-key violation rather than e.g. a NOT NULL one."""
    orig = getattr(error, 'orig', None)
    args = getattr(orig, 'args', ())
    if args and args[0] == MYSQL_DUPLICATE_KEY:
        return True
    text = str(orig).lower()
    return 'duplicate entry' in text or 'unique constraint failed' in text


def login(user_id, password):
    """
    Verifies credentials and returns the public profile.

    An unknown id and a wrong password produce the same 401; only the log
    says which one it was.
    """
    try:
        user = UserInfo.query.filter_by(id=user_id).first()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Login lookup failed for id {user_id}: {str(e)}", exc_info=True)
        return StoreFailure().to_result()

    if user is None:
        current_app.logger.warning(f"Login failed for id {user_id}: unknown id")
        return Unauthenticated().to_result()

    if not verify_password(password, user.password_hash):
        current_app.logger.warning(f"Login failed for id {user_id}: bad password")
        return Unauthenticated().to_result()

    current_app.logger.info(f"Login succeeded for id {user_id} (uid={user.uid})")
    return {"success": True, "data": user.to_dict()}


def register(user_id, password, name):
    """
    Creates an account with default stats.

    There is no pre-check query: a taken id surfaces as the insert's
    duplicate-key IntegrityError.
    """
    try:
        user = UserInfo(id=user_id, password_hash=hash_password(password), name=name)
        db.session.add(user)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if _is_duplicate_key(e):
            current_app.logger.warning(f"Register rejected for id {user_id}: id already exists")
            return Conflict("id already exists").to_result()
        current_app.logger.error(f"Register failed for id {user_id}: {str(e)}", exc_info=True)
        return StoreFailure().to_result()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Register failed for id {user_id}: {str(e)}", exc_info=True)
        return StoreFailure().to_result()

    current_app.logger.info(f"Registered id {user_id}")
    return {"success": True, "message": "Registration complete."}


def _apply_progress(uid, values):
    """Runs a single UPDATE for uid. Returns a result dict or error tuple."""
    try:
        affected = UserInfo.query.filter_by(uid=uid).update(values, synchronize_session=False)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Progress save failed for uid {uid}: {str(e)}", exc_info=True)
        return StoreFailure().to_result()

    if affected == 0:
        current_app.logger.warning(f"Progress save for uid {uid}: no such uid")
        return NotFound("no such uid").to_result()

    current_app.logger.info(f"Progress saved for uid {uid}: {', '.join(column.key for column in values)}")
    return {"success": True, "message": "User info updated."}


def replace_progress(uid, level, hp, atk, exp, cleared_stage_code=None):
    """
    Overwrites every progression field of the user.

    This is a replace, not a merge: the caller must supply all stats, and a
    missing cleared_stage_code is written as NULL. Concurrent saves for the
    same uid are not serialised; the last commit wins.
    """
    if uid is None or uid <= 0:
        return MalformedRequest().to_result()

    values = {
        UserInfo.level: level,
        UserInfo.hp: hp,
        UserInfo.atk: atk,
        UserInfo.exp: exp,
        UserInfo.cleared_stage_code: cleared_stage_code or None,
    }
    return _apply_progress(uid, values)


def update_progress(uid, changes):
    """
    Writes only the progression fields present in changes.

    changes maps any of level/hp/atk/exp/clearedStageCode to new values.
    """
    if uid is None or uid <= 0:
        return MalformedRequest().to_result()

    columns = {
        'level': UserInfo.level,
        'hp': UserInfo.hp,
        'atk': UserInfo.atk,
        'exp': UserInfo.exp,
        'clearedStageCode': UserInfo.cleared_stage_code,
    }
    values = {}
    for field, value in changes.items():
        if field not in columns:
            continue
        if field == 'clearedStageCode':
            value = value or None
        values[columns[field]] = value

    if not values:
        return MalformedRequest().to_result()

    return _apply_progress(uid, values)
