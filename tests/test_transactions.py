"""
Unit tests for commit error translation.
"""
import unittest
from unittest.mock import MagicMock

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, OperationalError

from librestock.core.transactions import commit_or_raise

SKU_MESSAGES = {"products.sku": "A product with this SKU already exists"}


def integrity_error(message):
    return IntegrityError("INSERT INTO products ...", {}, Exception(message))


class TestCommitOrRaise(unittest.TestCase):
    """Mapping of database errors onto HTTP errors."""

    def setUp(self):
        self.db = MagicMock()

    def test_commit_success(self):
        commit_or_raise(self.db, "Unable to create product")

        self.db.commit.assert_called_once()
        self.db.rollback.assert_not_called()

    def test_matching_constraint_uses_its_message(self):
        self.db.commit.side_effect = integrity_error("UNIQUE constraint failed: products.sku")

        with self.assertRaises(HTTPException) as ctx:
            commit_or_raise(self.db, "Unable to create product", constraint_details=SKU_MESSAGES)

        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(ctx.exception.detail, "A product with this SKU already exists")
        self.db.rollback.assert_called_once()

    def test_other_constraint_uses_generic_message(self):
        self.db.commit.side_effect = integrity_error("FOREIGN KEY constraint failed")

        with self.assertRaises(HTTPException) as ctx:
            commit_or_raise(self.db, "Unable to create product", constraint_details=SKU_MESSAGES)

        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(ctx.exception.detail, "Unable to create product")

    def test_conflict_detail_is_the_default(self):
        self.db.commit.side_effect = integrity_error("FOREIGN KEY constraint failed")

        with self.assertRaises(HTTPException) as ctx:
            commit_or_raise(self.db, "Unable to delete client", conflict_detail="Client still has orders")

        self.assertEqual(ctx.exception.detail, "Client still has orders")

    def test_other_database_errors_are_500(self):
        self.db.commit.side_effect = OperationalError("COMMIT", {}, Exception("disk I/O error"))

        with self.assertRaises(HTTPException) as ctx:
            commit_or_raise(self.db, "Unable to update order status")

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.detail, "Unable to update order status")
        self.db.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
