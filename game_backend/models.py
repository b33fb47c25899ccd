# models.py

import enum
from flask import current_app
from . import db
from .errors import ContentDecodeError

# Table and column names match the existing MySQL schemas, so every mapped
# attribute names its column explicitly.


# --- ENUMS STORED AS STRINGS ---

class MonsterGrade(enum.Enum):
    NORMAL = 'Normal'
    ELITE = 'Elite'
    BOSS = 'Boss'


class CardType(enum.Enum):
    ATTACK = 'Attack'
    DEFENSE = 'Defense'
    HEAL = 'Heal'
    BUFF = 'Buff'


def decode_enum(enum_cls, raw_value, strict=None):
    """
    Decodes a stored string into a member of enum_cls, ignoring case.

    Unknown values fall back to the first member (the zero value) unless
    strict decoding is on, in which case ContentDecodeError is raised.
    When strict is None the STRICT_ENUM_DECODE setting decides.
    """
    if strict is None:
        strict = current_app.config.get('STRICT_ENUM_DECODE', False)

    text = (raw_value or '').strip().lower()
    for member in enum_cls:
        if text in (member.value.lower(), member.name.lower()):
            return member

    if strict:
        raise ContentDecodeError(enum_cls.__name__, raw_value)

    fallback = next(iter(enum_cls))
    current_app.logger.warning(
        f"Unknown {enum_cls.__name__} value {raw_value!r}; decoded as {fallback.value}"
    )
    return fallback


# --- 1. ACCOUNT SCHEMA ---

class UserInfo(db.Model):
    """
    A player account. UID is assigned by the store and never changes;
    ID is the unique login name.
    """
    __tablename__ = 'UserInfo'

    uid = db.Column('UID', db.Integer, primary_key=True, autoincrement=True)
    id = db.Column('ID', db.String(64), unique=True, nullable=False)
    # werkzeug scrypt hashes run to ~165 chars; legacy bcrypt rows are 60.
    password_hash = db.Column('PW', db.String(256), nullable=False)
    name = db.Column('Name', db.String(64), nullable=False)
    level = db.Column('Level', db.Integer, nullable=False, default=1, server_default='1')
    exp = db.Column('EXP', db.Integer, nullable=False, default=0, server_default='0')
    hp = db.Column('HP', db.Integer, nullable=False, default=100, server_default='100')
    atk = db.Column('ATK', db.Integer, nullable=False, default=10, server_default='10')
    cleared_stage_code = db.Column('ClearedStageCode', db.String(32), nullable=True)

    def to_dict(self):
        """Public profile. The password hash is never part of it."""
        return {
            'uid': self.uid,
            'id': self.id,
            'name': self.name,
            'level': self.level,
            'exp': self.exp,
            'hp': self.hp,
            'atk': self.atk,
            'clearedStageCode': self.cleared_stage_code,
        }

    def __repr__(self):
        return f'<UserInfo {self.id} (uid={self.uid})>'


# --- 2. GAME CONTENT SCHEMA (read-only) ---

class Stage(db.Model):
    __bind_key__ = 'game'
    __tablename__ = 'Stage'

    stage_code = db.Column('StageCode', db.String(32), primary_key=True)
    stage_name = db.Column('StageName', db.String(64), nullable=False)
    monster_count = db.Column('MonsterCount', db.Integer, nullable=False, default=0)
    monster_code_1 = db.Column('MonsterCode1', db.String(32), nullable=True)
    monster_code_2 = db.Column('MonsterCode2', db.String(32), nullable=True)
    monster_code_3 = db.Column('MonsterCode3', db.String(32), nullable=True)
    prerequisite_stage = db.Column('PrerequisiteStage', db.String(32), nullable=True)

    @property
    def monster_codes(self):
        """The stage's monster codes with empty slots dropped."""
        codes = (self.monster_code_1, self.monster_code_2, self.monster_code_3)
        return [code for code in codes if code]

    def to_dict(self):
        return {
            'stageCode': self.stage_code,
            'stageName': self.stage_name,
            'monsterCount': self.monster_count,
            'monsterCode1': self.monster_code_1,
            'monsterCode2': self.monster_code_2,
            'monsterCode3': self.monster_code_3,
            'monsterCodes': self.monster_codes,
            'prerequisiteStage': self.prerequisite_stage,
        }


class Monster(db.Model):
    __bind_key__ = 'game'
    __tablename__ = 'Monster'

    monster_code = db.Column('MonsterCode', db.String(32), primary_key=True)
    monster_name = db.Column('MonsterName', db.String(64), nullable=False)
    grade_raw = db.Column('Grade', db.String(16), nullable=False)
    hp = db.Column('HP', db.Integer, nullable=False)
    atk = db.Column('ATK', db.Integer, nullable=False)
    reward_exp = db.Column('RewardExp', db.Integer, nullable=False)

    @property
    def grade(self):
        return decode_enum(MonsterGrade, self.grade_raw)

    def to_dict(self):
        return {
            'monsterCode': self.monster_code,
            'monsterName': self.monster_name,
            'grade': self.grade.value,
            'hp': self.hp,
            'atk': self.atk,
            'rewardExp': self.reward_exp,
        }


class Card(db.Model):
    __bind_key__ = 'game'
    __tablename__ = 'Card'

    card_code = db.Column('CardCode', db.String(32), primary_key=True)
    card_name = db.Column('CardName', db.String(64), nullable=False)
    card_type_raw = db.Column('CardType', db.String(16), nullable=False)
    cost = db.Column('Cost', db.Integer, nullable=False)
    effect_value = db.Column('EffectValue', db.Integer, nullable=False)
    description = db.Column('Description', db.String(256), nullable=True)

    @property
    def card_type(self):
        return decode_enum(CardType, self.card_type_raw)

    def to_dict(self):
        return {
            'cardCode': self.card_code,
            'cardName': self.card_name,
            'cardType': self.card_type.value,
            'cost': self.cost,
            'effectValue': self.effect_value,
            'description': self.description,
        }


class Level(db.Model):
    __bind_key__ = 'game'
    __tablename__ = 'Level'

    level_value = db.Column('LevelValue', db.Integer, primary_key=True, autoincrement=False)
    required_exp = db.Column('RequiredExp', db.Integer, nullable=False)
    hp = db.Column('HP', db.Integer, nullable=False)
    atk = db.Column('ATK', db.Integer, nullable=False)

    def to_dict(self):
        return {
            'levelValue': self.level_value,
            'requiredExp': self.required_exp,
            'hp': self.hp,
            'atk': self.atk,
        }
