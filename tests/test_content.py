"""Reference data lookup tests: stages, monsters, cards and levels."""

import pytest

from game_backend.models import MonsterGrade, CardType, decode_enum
from game_backend.errors import ContentDecodeError


class TestStage:

    def test_found(self, client, content):
        response = client.get('/stage/ST002')

        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'stageCode': 'ST002',
            'stageName': 'Sunken Keep',
            'monsterCount': 3,
            'monsterCode1': 'MON001',
            'monsterCode2': 'MON002',
            'monsterCode3': 'MON003',
            'monsterCodes': ['MON001', 'MON002', 'MON003'],
            'prerequisiteStage': 'ST001',
        }

    def test_nullable_columns(self, client, content):
        data = client.get('/stage/ST001').get_json()['data']

        assert data['monsterCode3'] is None
        assert data['monsterCodes'] == ['MON001', 'MON002']
        assert data['prerequisiteStage'] is None

    def test_absent_is_404_not_500(self, client, app):
        response = client.get('/stage/ST404')

        assert response.status_code == 404
        assert response.get_json()['success'] is False


@pytest.mark.parametrize('path', [
    '/stage/', '/stage', '/monster/', '/monster', '/card/', '/card', '/level/', '/level', '/level/%20',
])
def test_missing_path_parameter_is_400(client, app, path):
    response = client.get(path)
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 400


class TestMonster:

    def test_found(self, client, content):
        response = client.get('/monster/MON001')

        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'monsterCode': 'MON001',
            'monsterName': 'Slime',
            'grade': 'Normal',
            'hp': 30,
            'atk': 4,
            'rewardExp': 5,
        }

    def test_grade_is_case_insensitive(self, client, content):
        assert client.get('/monster/MON003').get_json()['data']['grade'] == 'Boss'

    def test_unknown_grade_falls_back(self, client, content):
        response = client.get('/monster/MON999')

        assert response.status_code == 200
        assert response.get_json()['data']['grade'] == 'Normal'

    def test_unknown_grade_fails_when_strict(self, client, content, app):
        app.config['STRICT_ENUM_DECODE'] = True
        response = client.get('/monster/MON999')

        assert response.status_code == 500
        assert 'Legendary' not in response.get_data(as_text=True)

    def test_absent(self, client, content):
        assert client.get('/monster/MON404').status_code == 404


class TestCard:

    def test_found(self, client, content):
        response = client.get('/card/CARD001')

        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'cardCode': 'CARD001',
            'cardName': 'Slash',
            'cardType': 'Attack',
            'cost': 1,
            'effectValue': 6,
            'description': 'Deal 6 damage.',
        }

    def test_null_description_and_upper_case_type(self, client, content):
        data = client.get('/card/CARD002').get_json()['data']

        assert data['cardType'] == 'Heal'
        assert data['description'] is None

    def test_unknown_type_falls_back(self, client, content):
        assert client.get('/card/CARD999').get_json()['data']['cardType'] == 'Attack'

    def test_absent(self, client, content):
        assert client.get('/card/CARD404').status_code == 404


class TestLevel:

    def test_found(self, client, content):
        response = client.get('/level/2')

        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'levelValue': 2,
            'requiredExp': 50,
            'hp': 120,
            'atk': 12,
        }

    def test_absent(self, client, content):
        assert client.get('/level/99').status_code == 404

    def test_not_a_number(self, client, content):
        assert client.get('/level/two').status_code == 400

    def test_out_of_range(self, client, content):
        assert client.get('/level/99999999999999999999').status_code == 400


class TestDecodeEnum:

    def test_matches_value_and_name(self, app):
        assert decode_enum(MonsterGrade, 'Elite') is MonsterGrade.ELITE
        assert decode_enum(MonsterGrade, 'ELITE') is MonsterGrade.ELITE
        assert decode_enum(CardType, ' buff ') is CardType.BUFF

    def test_fallback_is_first_member(self, app):
        assert decode_enum(CardType, 'Trap', strict=False) is CardType.ATTACK
        assert decode_enum(MonsterGrade, None, strict=False) is MonsterGrade.NORMAL

    def test_strict_raises(self, app):
        with pytest.raises(ContentDecodeError) as excinfo:
            decode_enum(CardType, 'Trap', strict=True)
        assert excinfo.value.raw_value == 'Trap'
