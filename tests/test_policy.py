import unittest

from luct.auth.policy import POLICIES, authorize, is_allowed, owner_scoped
from luct.models import UserRole
from luct.schemas.user_schema import Identity
from luct.utils.errors import Forbidden


def identity(role, user_id=1, name="Someone"):
    return Identity(id=user_id, role=role, name=name, email=f"{user_id}@luct.ac.ls")


class TestPolicies(unittest.TestCase):
    def test_class_create_roles(self):
        for role in (UserRole.lecturer, UserRole.prl, UserRole.pl):
            self.assertTrue(is_allowed(identity(role), "class.create"))
        self.assertFalse(is_allowed(identity(UserRole.student), "class.create"))

    def test_class_update_program_leader_or_owner(self):
        self.assertTrue(is_allowed(identity(UserRole.pl, user_id=1), "class.update", owner_id=2))
        self.assertTrue(is_allowed(identity(UserRole.lecturer, user_id=2), "class.update", owner_id=2))
        self.assertFalse(is_allowed(identity(UserRole.lecturer, user_id=3), "class.update", owner_id=2))
        self.assertFalse(is_allowed(identity(UserRole.prl, user_id=3), "class.delete", owner_id=2))

    def test_owner_check_needs_an_owner(self):
        self.assertFalse(is_allowed(identity(UserRole.lecturer, user_id=2), "class.update", owner_id=None))

    def test_feedback_is_prl_only(self):
        self.assertTrue(is_allowed(identity(UserRole.prl), "report.feedback"))
        for role in (UserRole.student, UserRole.lecturer, UserRole.pl):
            self.assertFalse(is_allowed(identity(role), "report.feedback"))

    def test_authorize_raises_with_policy_message(self):
        with self.assertRaises(Forbidden) as ctx:
            authorize(identity(UserRole.student), "class.create")
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.detail, POLICIES["class.create"].message)

    def test_lecturers_are_owner_scoped_on_reports(self):
        self.assertTrue(owner_scoped(identity(UserRole.lecturer), "report.view"))
        self.assertFalse(owner_scoped(identity(UserRole.prl), "report.view"))
        self.assertFalse(owner_scoped(identity(UserRole.student), "class.options"))
        self.assertFalse(owner_scoped(identity(UserRole.lecturer), "class.create"))
