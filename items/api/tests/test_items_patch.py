import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from items.models import Item
from reviews.models import Review

User = get_user_model()

MEDIA_ROOT = tempfile.mkdtemp()


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class ItemPatchTests(APITestCase):
    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.admin = User.objects.create_user("admin", password="pass1234", is_staff=True)
        self.admin_token = Token.objects.create(user=self.admin)
        self.user = User.objects.create_user("alice", password="pass1234")
        self.user_token = Token.objects.create(user=self.user)
        self.item = Item.objects.create(locator="flcl", title="FLCL", description="Guitars.")
        Item.objects.create(locator="bna", title="BNA", description="Beastmen.")
        Review.objects.create(item=self.item, user=self.user, rating=8)
        self.url = reverse("item-detail", args=["flcl"])

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_patch_title_only(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"title": "Fooly Cooly"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["title"], "Fooly Cooly")
        self.assertEqual(res.data["description"], "Guitars.")
        self.assertEqual(res.data["score"], 8.0)

    def test_rename_moves_image_and_keeps_reviews(self):
        default_storage.save("items/flcl", ContentFile(b"img"))
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"locator": "fooly_cooly"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["locator"], "fooly_cooly")
        self.assertEqual(res.data["review_count"], 1)
        self.assertFalse(default_storage.exists("items/flcl"))
        self.assertTrue(default_storage.exists("items/fooly_cooly"))

    def test_rename_to_same_locator_200(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"locator": "flcl"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_rename_conflict_409(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"locator": "bna"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)

    def test_blank_field_400(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"title": "  "}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "empty_fields")

    def test_regular_user_403(self):
        self.auth(self.user_token)
        res = self.client.patch(self.url, {"title": "x"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_item_404(self):
        self.auth(self.admin_token)
        res = self.client.patch(reverse("item-detail", args=["nope"]), {"title": "x"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
