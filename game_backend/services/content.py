# game_backend/services/content.py
# Read-only lookups against the game content schema.

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from game_backend import db
from game_backend.models import Stage, Monster, Card, Level
from game_backend.errors import NotFound, StoreFailure, ContentDecodeError


def _lookup(model, key, label):
    """
    Fetches one row of model by primary key and maps it to a dict.

    Returns {"success": True, "data": {...}} or an (error_dict, status) tuple.
    """
    try:
        row = db.session.get(model, key)
        if row is None:
            current_app.logger.info(f"{label} lookup: {key!r} not found")
            return NotFound(f"{label} not found.").to_result()
        return {"success": True, "data": row.to_dict()}
    except ContentDecodeError as e:
        current_app.logger.error(f"{label} {key!r} has undecodable content: {str(e)}")
        return StoreFailure().to_result()
    except SQLAlchemyError as e:
        current_app.logger.error(f"{label} lookup failed for {key!r}: {str(e)}", exc_info=True)
        return StoreFailure().to_result()


def get_stage(stage_code):
    return _lookup(Stage, stage_code, "Stage")


def get_monster(monster_code):
    return _lookup(Monster, monster_code, "Monster")


def get_card(card_code):
    return _lookup(Card, card_code, "Card")


def get_level(level_value):
    return _lookup(Level, level_value, "Level")
