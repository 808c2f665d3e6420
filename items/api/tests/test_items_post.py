import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from items.models import Item

User = get_user_model()

MEDIA_ROOT = tempfile.mkdtemp()


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class ItemCreateTests(APITestCase):
    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.url = reverse("item-list")
        self.admin = User.objects.create_user("admin", password="pass1234", is_staff=True)
        self.admin_token = Token.objects.create(user=self.admin)
        self.user = User.objects.create_user("alice", password="pass1234")
        self.user_token = Token.objects.create(user=self.user)
        self.payload = {"locator": "beastars", "title": "Beastars", "description": "Wolves."}

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_admin_creates_item_201(self):
        self.auth(self.admin_token)
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["locator"], "beastars")
        self.assertEqual(res.data["score"], 0)
        self.assertTrue(Item.objects.filter(locator="beastars").exists())

    def test_unauthenticated_401(self):
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_regular_user_403(self):
        self.auth(self.user_token)
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_duplicate_locator_409(self):
        self.auth(self.admin_token)
        self.client.post(self.url, self.payload, format="json")
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data["code"], "duplicate_item")

    def test_missing_fields_400(self):
        self.auth(self.admin_token)
        res = self.client.post(self.url, {"locator": "beastars"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "empty_fields")

    def test_illegal_locator_400(self):
        self.auth(self.admin_token)
        res = self.client.post(self.url, {**self.payload, "locator": "bea stars"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["code"], "illegal_locator")

    def test_upload_image(self):
        self.auth(self.admin_token)
        image = SimpleUploadedFile("cover.png", b"\x89PNG fake", content_type="image/png")
        res = self.client.post(self.url, {**self.payload, "image": image}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(default_storage.exists("items/beastars"))
        self.assertTrue(res.data["image"].endswith("/media/items/beastars"))

    def test_non_image_upload_422_creates_nothing(self):
        self.auth(self.admin_token)
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        res = self.client.post(self.url, {**self.payload, "image": upload}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(res.data["code"], "not_valid_image")
        self.assertFalse(Item.objects.exists())
