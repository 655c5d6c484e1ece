"""Unit tests for app.core.security.PasswordHasher: salted bcrypt hashing and verification."""

import unittest

from app.core.security import PasswordHasher


class TestHashAndVerify(unittest.TestCase):
    """hash() output verifies only the original password."""

    def setUp(self) -> None:
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_verifies_original_password(self) -> None:
        hashed = self.hasher.hash("pw123456")
        self.assertTrue(self.hasher.verify("pw123456", hashed))

    def test_other_password_does_not_verify(self) -> None:
        hashed = self.hasher.hash("pw123456")
        self.assertFalse(self.hasher.verify("pw1234567", hashed))
        self.assertFalse(self.hasher.verify("", hashed))

    def test_hash_is_salted(self) -> None:
        first = self.hasher.hash("same-password")
        second = self.hasher.hash("same-password")
        self.assertNotEqual(first, second)
        self.assertTrue(self.hasher.verify("same-password", first))
        self.assertTrue(self.hasher.verify("same-password", second))

    def test_hash_is_not_plaintext(self) -> None:
        hashed = self.hasher.hash("pw123456")
        self.assertNotIn("pw123456", hashed)
        self.assertTrue(hashed.startswith("$2"))

    def test_long_passwords_differing_after_72_bytes_do_not_collide(self) -> None:
        base = "x" * 80
        hashed = self.hasher.hash(base + "a")
        self.assertTrue(self.hasher.verify(base + "a", hashed))
        self.assertFalse(self.hasher.verify(base + "b", hashed))

    def test_non_ascii_password(self) -> None:
        hashed = self.hasher.hash("pässwörd-密码")
        self.assertTrue(self.hasher.verify("pässwörd-密码", hashed))
        self.assertFalse(self.hasher.verify("passwort-密码", hashed))


class TestWorkFactor(unittest.TestCase):
    """Hashes made at another cost factor still verify."""

    def test_hash_from_previous_rounds_verifies(self) -> None:
        old = PasswordHasher(rounds=5).hash("pw123456")
        current = PasswordHasher(rounds=4)
        self.assertTrue(current.verify("pw123456", old))

    def test_rounds_embedded_in_hash(self) -> None:
        hashed = PasswordHasher(rounds=5).hash("pw123456")
        self.assertIn("$05$", hashed)


class TestMalformedHashes(unittest.TestCase):
    """verify() returns False instead of raising for unusable hashes."""

    def setUp(self) -> None:
        self.hasher = PasswordHasher(rounds=4)

    def test_empty_hash(self) -> None:
        self.assertFalse(self.hasher.verify("pw123456", ""))

    def test_none_hash(self) -> None:
        self.assertFalse(self.hasher.verify("pw123456", None))

    def test_garbage_hash(self) -> None:
        self.assertFalse(self.hasher.verify("pw123456", "not-a-bcrypt-hash"))

    def test_truncated_hash(self) -> None:
        hashed = self.hasher.hash("pw123456")
        self.assertFalse(self.hasher.verify("pw123456", hashed[:20]))


class TestDummyVerification(unittest.TestCase):
    """verify_dummy() always fails but still performs a comparison."""

    def test_verify_dummy_is_false(self) -> None:
        hasher = PasswordHasher(rounds=4)
        self.assertFalse(hasher.verify_dummy("anything"))
        self.assertFalse(hasher.verify_dummy(""))


if __name__ == "__main__":
    unittest.main()
