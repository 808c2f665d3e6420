from django.contrib.auth import get_user_model
from django.test import TestCase

from common.errors import DuplicateItem, EmptyFields, IllegalLocator
from common.media import ITEM_IMAGES, DeleteFile, RenameFile
from items.models import Item
from items.services import ItemUpdate, add_item, edit_item, remove_item
from reviews.models import Review

User = get_user_model()


class AddItemTests(TestCase):
    def test_add_item(self):
        item = add_item("ergo_proxy", "Ergo Proxy", "Robots in a dome.")
        self.assertEqual(item.locator, "ergo_proxy")
        self.assertEqual(item.title, "Ergo Proxy")

    def test_title_and_description_stored_as_given(self):
        item = add_item("ergo_proxy", " Ergo Proxy ", "Robots in a dome.\n")
        self.assertEqual(item.title, " Ergo Proxy ")
        self.assertEqual(item.description, "Robots in a dome.\n")

    def test_blank_fields(self):
        with self.assertRaises(EmptyFields):
            add_item("ergo_proxy", "   ", "d")

    def test_illegal_locator(self):
        with self.assertRaises(IllegalLocator):
            add_item("ergo proxy", "Ergo Proxy", "d")
        with self.assertRaises(IllegalLocator):
            add_item("ergo-proxy", "Ergo Proxy", "d")

    def test_padded_locator_is_illegal(self):
        with self.assertRaises(IllegalLocator):
            add_item("m1 ", "T", "D")
        with self.assertRaises(IllegalLocator):
            add_item(" m2", "T", "D")
        self.assertFalse(Item.objects.exists())

    def test_duplicate_locator(self):
        add_item("ergo_proxy", "Ergo Proxy", "d")
        with self.assertRaises(DuplicateItem):
            add_item("ergo_proxy", "Another", "d")
        self.assertEqual(Item.objects.count(), 1)


class EditItemTests(TestCase):
    def setUp(self):
        self.item = Item.objects.create(locator="flcl", title="FLCL", description="d")
        Item.objects.create(locator="bna", title="BNA", description="d")

    def test_partial_update_keeps_other_fields(self):
        item, intents = edit_item("flcl", ItemUpdate(title="Fooly Cooly"))
        self.assertEqual(item.title, "Fooly Cooly")
        self.assertEqual(item.description, "d")
        self.assertEqual(intents, [])

    def test_rename_emits_image_intent(self):
        item, intents = edit_item("flcl", ItemUpdate(locator="fooly_cooly"))
        self.assertEqual(item.locator, "fooly_cooly")
        self.assertEqual(intents, [RenameFile(ITEM_IMAGES, "flcl", "fooly_cooly")])
        self.assertFalse(Item.objects.filter(locator="flcl").exists())

    def test_same_locator_is_not_a_conflict(self):
        item, intents = edit_item("flcl", ItemUpdate(locator="flcl", title="FLCL 2"))
        self.assertEqual(item.title, "FLCL 2")
        self.assertEqual(intents, [])

    def test_rename_conflict(self):
        with self.assertRaises(DuplicateItem):
            edit_item("flcl", ItemUpdate(locator="bna"))

    def test_blank_provided_field(self):
        with self.assertRaises(EmptyFields):
            edit_item("flcl", ItemUpdate(description=" "))

    def test_illegal_new_locator(self):
        with self.assertRaises(IllegalLocator):
            edit_item("flcl", ItemUpdate(locator="fooly cooly"))
        with self.assertRaises(IllegalLocator):
            edit_item("flcl", ItemUpdate(locator=" flcl"))

    def test_unknown_item(self):
        self.assertEqual(edit_item("nope", ItemUpdate(title="x")), (None, []))


class RemoveItemTests(TestCase):
    def test_remove_cascades_reviews(self):
        user = User.objects.create_user("alice", password="x")
        item = Item.objects.create(locator="flcl", title="FLCL", description="d")
        Review.objects.create(item=item, user=user, rating=7)

        intents = remove_item("flcl")

        self.assertEqual(intents, [DeleteFile(ITEM_IMAGES, "flcl")])
        self.assertFalse(Item.objects.exists())
        self.assertFalse(Review.objects.exists())

    def test_remove_unknown_item(self):
        self.assertEqual(remove_item("nope"), [])
