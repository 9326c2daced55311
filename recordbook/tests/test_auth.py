import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from recordbook.auth import Claims, decode_token, issue_token
from recordbook.config import Settings
from recordbook.errors import AuthError


class TokenTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(_env_file=None, jwt_secret="test-secret")

    def test_issue_and_decode(self):
        token = issue_token("user-a", "Pat", self.settings)
        self.assertEqual(
            decode_token(token, self.settings), Claims(id="user-a", first_name="Pat")
        )

    def test_sub_claim_is_accepted(self):
        token = jwt.encode(
            {"sub": "auth0|123", "nickname": "pat", "email": "pat@example.com"},
            "test-secret",
            algorithm="HS256",
        )
        claims = decode_token(token, self.settings)
        self.assertEqual(claims.id, "auth0|123")
        self.assertEqual(claims.first_name, "pat")
        self.assertEqual(claims.email, "pat@example.com")

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {"id": "user-a", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            "test-secret",
            algorithm="HS256",
        )
        with self.assertRaises(AuthError):
            decode_token(token, self.settings)

    def test_token_without_identity_is_rejected(self):
        token = jwt.encode({"first_name": "Pat"}, "test-secret", algorithm="HS256")
        with self.assertRaises(AuthError):
            decode_token(token, self.settings)

    def test_audience_and_issuer_are_checked(self):
        settings = Settings(
            _env_file=None,
            jwt_secret="test-secret",
            jwt_audience="recordbook",
            jwt_issuer="https://issuer.example.com/",
        )
        token = issue_token("user-a", "Pat", settings)
        self.assertEqual(decode_token(token, settings).id, "user-a")

        with self.assertRaises(AuthError):
            decode_token(issue_token("user-a", "Pat", self.settings), settings)


if __name__ == "__main__":
    unittest.main()
