"""Tests for password hashing and verification."""

import bcrypt

from game_backend.credentials import hash_password, verify_password
from game_backend.models import UserInfo


class TestHashPassword:

    def test_hash_is_not_plaintext(self):
        hashed = hash_password('pass123')
        assert hashed != 'pass123'
        assert 'pass123' not in hashed

    def test_hash_is_salted(self):
        assert hash_password('pass123') != hash_password('pass123')

    def test_hash_is_self_describing(self):
        method, salt, digest = hash_password('pass123').split('$', 2)
        assert method
        assert salt
        assert digest


class TestVerifyPassword:

    def test_matching_password(self):
        assert verify_password('pass123', hash_password('pass123'))

    def test_wrong_password(self):
        assert not verify_password('pass124', hash_password('pass123'))

    def test_malformed_hashes_do_not_raise(self):
        for stored in ('', None, 'plaintext', 'nope$nope$nope', '$2b$not-a-bcrypt-hash'):
            assert verify_password('pass123', stored) is False

    def test_legacy_bcrypt_hash(self):
        legacy = bcrypt.hashpw(b'pass123', bcrypt.gensalt(rounds=4)).decode('utf-8')

        assert verify_password('pass123', legacy)
        assert not verify_password('wrong', legacy)

    def test_legacy_2a_prefix(self):
        legacy = bcrypt.hashpw(b'pass123', bcrypt.gensalt(rounds=4, prefix=b'2a')).decode('utf-8')
        assert verify_password('pass123', legacy)


class TestStoredHashWidth:

    def test_new_hash_fits_password_column(self):
        width = UserInfo.__table__.c.PW.type.length
        assert len(hash_password('x' * 128)) <= width
