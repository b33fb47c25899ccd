"""Pytest configuration and fixtures.

This module provides fixtures for:
- An application wired to two in-memory SQLite databases (account and game binds)
- A Flask test client
- Seeded users and content rows
"""

import pytest

from game_backend import create_app, db
from game_backend.config import Config
from game_backend.credentials import hash_password
from game_backend.models import UserInfo, Stage, Monster, Card, Level


class TestConfig(Config):
    __test__ = False  # Prevent pytest from collecting this as a test class

    TESTING = True
    DB_HOST = 'localhost'
    DB_USER = 'test'
    DB_PASSWORD = 'test'
    ACCOUNT_DB_NAME = 'account'
    GAME_DB_NAME = 'game'

    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_BINDS = {'game': 'sqlite://'}
    SQLALCHEMY_ENGINE_OPTIONS = {}
    STRICT_ENUM_DECODE = False
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    """A registered user 'hero1' with password 'pass123'."""
    account = UserInfo(
        id='hero1',
        password_hash=hash_password('pass123'),
        name='Hero',
        level=3,
        exp=120,
        hp=150,
        atk=18,
        cleared_stage_code='ST002',
    )
    db.session.add(account)
    db.session.commit()
    return account


@pytest.fixture
def content(app):
    """One row of each kind of reference data."""
    db.session.add_all([
        Stage(
            stage_code='ST001',
            stage_name='Mossy Cave',
            monster_count=2,
            monster_code_1='MON001',
            monster_code_2='MON002',
            monster_code_3=None,
            prerequisite_stage=None,
        ),
        Stage(
            stage_code='ST002',
            stage_name='Sunken Keep',
            monster_count=3,
            monster_code_1='MON001',
            monster_code_2='MON002',
            monster_code_3='MON003',
            prerequisite_stage='ST001',
        ),
        Monster(monster_code='MON001', monster_name='Slime', grade_raw='Normal', hp=30, atk=4, reward_exp=5),
        Monster(monster_code='MON003', monster_name='Lich', grade_raw='boss', hp=900, atk=70, reward_exp=400),
        Monster(monster_code='MON999', monster_name='Glitch', grade_raw='Legendary', hp=1, atk=1, reward_exp=1),
        Card(card_code='CARD001', card_name='Slash', card_type_raw='Attack', cost=1,
             effect_value=6, description='Deal 6 damage.'),
        Card(card_code='CARD002', card_name='Mend', card_type_raw='HEAL', cost=2,
             effect_value=8, description=None),
        Card(card_code='CARD999', card_name='Odd', card_type_raw='Trap', cost=0,
             effect_value=0, description='Unknown type.'),
        Level(level_value=1, required_exp=0, hp=100, atk=10),
        Level(level_value=2, required_exp=50, hp=120, atk=12),
    ])
    db.session.commit()


def reload_user(uid):
    """Reads the user row fresh from the store."""
    db.session.expire_all()
    return db.session.get(UserInfo, uid)
