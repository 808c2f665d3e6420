from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from common import policy

User = get_user_model()


class PolicyTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user("admin", password="x", is_staff=True)
        self.other_admin = User.objects.create_user("admin2", password="x", is_staff=True)
        self.alice = User.objects.create_user("alice", password="x")
        self.bob = User.objects.create_user("bob", password="x")
        self.anon = AnonymousUser()

    def test_only_admins_manage_items(self):
        self.assertTrue(policy.can_manage_items(self.admin))
        self.assertFalse(policy.can_manage_items(self.alice))
        self.assertFalse(policy.can_manage_items(self.anon))
        self.assertFalse(policy.can_manage_items(None))

    def test_users_edit_themselves_admins_edit_anyone(self):
        self.assertTrue(policy.can_edit_user(self.alice, self.alice))
        self.assertFalse(policy.can_edit_user(self.alice, self.bob))
        self.assertTrue(policy.can_edit_user(self.admin, self.bob))
        self.assertFalse(policy.can_edit_user(self.anon, self.bob))

    def test_admin_accounts_cannot_be_removed(self):
        self.assertTrue(policy.can_remove_user(self.alice, self.alice))
        self.assertTrue(policy.can_remove_user(self.admin, self.bob))
        self.assertFalse(policy.can_remove_user(self.admin, self.admin))
        self.assertFalse(policy.can_remove_user(self.admin, self.other_admin))
        self.assertFalse(policy.can_remove_user(self.alice, self.bob))

    def test_any_signed_in_user_can_rate(self):
        self.assertTrue(policy.can_rate(self.alice))
        self.assertTrue(policy.can_rate(self.admin))
        self.assertFalse(policy.can_rate(self.anon))
