"""Unit tests for FakeUserRepository — verifies Port contract compliance."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import EmailAlreadyExistsError
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_create_and_get_by_id(self):
        user = self.repo.create(email='a@x.com', password_hash='h', name='A', phone='555')

        loaded = self.repo.get_by_id(user.id)
        self.assertIsInstance(loaded, User)
        self.assertEqual(loaded.email, 'a@x.com')
        self.assertEqual(loaded.phone, '555')
        self.assertEqual(loaded.created_at, loaded.updated_at)

    def test_get_by_email(self):
        user = self.repo.create(email='a@x.com', password_hash='h', name='A')
        self.assertEqual(self.repo.get_by_email('a@x.com').id, user.id)
        self.assertIsNone(self.repo.get_by_email('b@x.com'))

    def test_create_duplicate_email_raises(self):
        self.repo.create(email='a@x.com', password_hash='h', name='A')
        with self.assertRaises(EmailAlreadyExistsError):
            self.repo.create(email='a@x.com', password_hash='h2', name='B')
        self.assertEqual(len(self.repo.store), 1)

    def test_update_profile_only_touches_profile_fields(self):
        user = self.repo.create(email='a@x.com', password_hash='h', name='A')

        updated = self.repo.update_profile(user.id, {'address': 'Here', 'email': 'z@x.com', 'password_hash': 'x'})

        self.assertEqual(updated.address, 'Here')
        self.assertEqual(updated.email, 'a@x.com')
        self.assertEqual(updated.password_hash, 'h')
        self.assertGreaterEqual(updated.updated_at, user.updated_at)

    def test_update_profile_missing_user(self):
        self.assertIsNone(self.repo.update_profile('missing', {'name': 'B'}))

    def test_returned_users_are_copies(self):
        user = self.repo.create(email='a@x.com', password_hash='h', name='A')
        user.email = 'mutated@x.com'
        self.assertEqual(self.repo.get_by_id(user.id).email, 'a@x.com')


if __name__ == '__main__':
    unittest.main()
