import re
import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from backend.app.auth.codec import TokenCodec
from backend.app.models.AuthToken import IdentityClaims
from tests.fakes import FakeClock, tamper_signature

KEY = b"codec-test-secret"
TTL = timedelta(hours=1)


class TestTokenCodec(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.codec = TokenCodec(KEY, clock=self.clock)
        self.claims = IdentityClaims(user_id=42, email="a@b.com", name="alice", signup_id=42)

    def test_round_trip(self):
        token = self.codec.encode(self.claims, TTL)
        self.assertEqual(self.codec.decode_and_verify(token), self.claims)

    def test_round_trip_without_signup_id(self):
        claims = IdentityClaims(user_id=7, email="x@y.org", name="bob")
        token = self.codec.encode(claims, TTL)
        self.assertEqual(self.codec.decode_and_verify(token), claims)

    def test_expiry_follows_injected_clock_behind_wall_time(self):
        clock = FakeClock(datetime.now(timezone.utc).replace(microsecond=0) - timedelta(hours=2))
        codec = TokenCodec(KEY, clock=clock)

        token = codec.encode(self.claims, TTL)
        # Already past "exp" by wall time, still valid by the codec clock
        self.assertEqual(codec.decode_and_verify(token), self.claims)

        clock.advance(TTL)
        self.assertIsNone(codec.decode_and_verify(token))

    def test_expiry_follows_injected_clock_ahead_of_wall_time(self):
        clock = FakeClock(datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=400))
        codec = TokenCodec(KEY, clock=clock)

        token = codec.encode(self.claims, TTL)
        self.assertEqual(codec.decode_and_verify(token), self.claims)

        clock.advance(timedelta(minutes=61))
        self.assertIsNone(codec.decode_and_verify(token))

    def test_valid_one_second_before_expiry(self):
        token = self.codec.encode(self.claims, TTL)
        self.clock.advance(TTL - timedelta(seconds=1))
        self.assertEqual(self.codec.decode_and_verify(token), self.claims)

    def test_rejected_exactly_at_expiry(self):
        token = self.codec.encode(self.claims, TTL)
        self.clock.advance(TTL)
        self.assertIsNone(self.codec.decode_and_verify(token))

    def test_rejected_after_expiry(self):
        token = self.codec.encode(self.claims, TTL)
        self.clock.advance(timedelta(minutes=61))
        self.assertIsNone(self.codec.decode_and_verify(token))

    def test_rejected_under_other_key(self):
        token = self.codec.encode(self.claims, TTL)
        other = TokenCodec(b"another-secret", clock=self.clock)
        self.assertIsNone(other.decode_and_verify(token))

    def test_rejected_when_signature_tampered(self):
        token = self.codec.encode(self.claims, TTL)
        self.assertIsNone(self.codec.decode_and_verify(tamper_signature(token)))

    def test_rejected_when_algorithm_differs(self):
        now = int(self.clock().timestamp())
        token = jwt.encode(
            {"sub": "42", "email": "a@b.com", "name": "alice", "iat": now, "exp": now + 3600},
            KEY,
            algorithm="HS512",
        )
        self.assertIsNone(self.codec.decode_and_verify(token))

    def test_rejected_when_claims_missing(self):
        now = int(self.clock().timestamp())
        token = jwt.encode({"sub": "42", "iat": now, "exp": now + 3600}, KEY, algorithm="HS256")
        self.assertIsNone(self.codec.decode_and_verify(token))

    def test_rejected_when_subject_not_numeric(self):
        now = int(self.clock().timestamp())
        token = jwt.encode(
            {"sub": "alice", "email": "a@b.com", "name": "alice", "iat": now, "exp": now + 3600},
            KEY,
            algorithm="HS256",
        )
        self.assertIsNone(self.codec.decode_and_verify(token))

    def test_malformed_tokens_are_rejected(self):
        for token in ("", "abc", "a.b.c", "not a token at all"):
            with self.subTest(token=token):
                self.assertIsNone(self.codec.decode_and_verify(token))

    def test_encoding_is_deterministic(self):
        issued_at = self.codec.now()
        first = self.codec.encode(self.claims, TTL, issued_at=issued_at)
        second = self.codec.encode(self.claims, TTL, issued_at=issued_at)
        self.assertEqual(first, second)

        self.clock.advance(timedelta(seconds=1))
        self.assertNotEqual(first, self.codec.encode(self.claims, TTL))

    def test_embedded_timestamps(self):
        issued_at = self.codec.now()
        token = self.codec.encode(self.claims, TTL, issued_at=issued_at)
        payload = jwt.get_unverified_claims(token)
        self.assertEqual(payload["iat"], int(issued_at.timestamp()))
        self.assertEqual(payload["exp"], int(self.codec.expiry(issued_at, TTL).timestamp()))
        self.assertEqual(payload["sub"], "42")
        self.assertEqual(jwt.get_unverified_header(token)["alg"], "HS256")

    def test_token_is_url_safe(self):
        token = self.codec.encode(self.claims, TTL)
        self.assertRegex(token, re.compile(r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$"))


if __name__ == "__main__":
    unittest.main()
