"""Unit tests for FakeChildRepository."""

import unittest
from datetime import date

from adapter.fake.child_repository import FakeChildRepository


class TestFakeChildRepository(unittest.TestCase):

    def setUp(self):
        self.repo = FakeChildRepository()

    def test_create_and_get(self):
        child = self.repo.create('parent-1', 'Mia', birth_date=date(2021, 1, 2), notes='n')
        loaded = self.repo.get_by_id(child.id)
        self.assertEqual(loaded.name, 'Mia')
        self.assertEqual(loaded.birth_date, date(2021, 1, 2))

    def test_list_by_parent_newest_first(self):
        first = self.repo.create('parent-1', 'First')
        second = self.repo.create('parent-1', 'Second')
        self.repo.store[first.id].created_at = second.created_at.replace(year=2000)

        self.assertEqual([c.name for c in self.repo.list_by_parent('parent-1')], ['Second', 'First'])
        self.assertEqual(self.repo.list_by_parent('parent-2'), [])

    def test_update_and_delete(self):
        child = self.repo.create('parent-1', 'Mia')

        self.assertEqual(self.repo.update(child.id, {'notes': 'x'}).notes, 'x')
        self.assertTrue(self.repo.delete(child.id))
        self.assertFalse(self.repo.delete(child.id))
        self.assertIsNone(self.repo.update(child.id, {'notes': 'y'}))


if __name__ == '__main__':
    unittest.main()
