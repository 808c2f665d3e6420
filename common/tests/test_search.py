from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase, override_settings

from common.search import trigram_similarity, trigrams
from items.models import Item
from items.queries import list_items
from profiles.queries import list_users
from reviews.models import Review

User = get_user_model()


class TrigramTests(SimpleTestCase):
    def test_word_is_padded_like_pg_trgm(self):
        self.assertEqual(trigrams("cat"), {"  c", " ca", "cat", "at "})

    def test_case_and_punctuation_are_ignored(self):
        self.assertEqual(trigrams("Steins;Gate"), trigrams("steins gate"))

    def test_identical_strings_score_one(self):
        self.assertEqual(trigram_similarity("Ergo Proxy", "ergo proxy"), 1.0)

    def test_empty_input_scores_zero(self):
        self.assertEqual(trigram_similarity("", "anything"), 0.0)
        self.assertEqual(trigram_similarity("!!!", "anything"), 0.0)

    def test_partial_overlap(self):
        # steins: 7 trigrams, all shared with "steins gate" (7 + 5)
        self.assertAlmostEqual(trigram_similarity("steins", "Steins;Gate"), 7 / 12)


class FuzzySearchTests(TestCase):
    def setUp(self):
        Item.objects.create(locator="steins_gate", title="Steins;Gate", description="d")
        Item.objects.create(locator="ergo_proxy", title="Ergo Proxy", description="d")
        Item.objects.create(locator="flcl", title="FLCL", description="d")

    def test_search_keeps_only_similar_titles(self):
        page = list_items(query="steins")
        self.assertEqual([item.locator for item in page.items], ["steins_gate"])
        self.assertEqual(page.query, "steins")

    def test_search_tolerates_typos(self):
        page = list_items(query="ergo proxi")
        self.assertEqual(page.items[0].locator, "ergo_proxy")

    def test_no_match_gives_no_page(self):
        self.assertIsNone(list_items(query="zzzzzz"))

    @override_settings(TRIGRAM_SIMILARITY_THRESHOLD=0.9)
    def test_threshold_comes_from_settings(self):
        self.assertIsNone(list_items(query="steins"))


class SearchOrderingTests(TestCase):
    def setUp(self):
        users = [User.objects.create_user(f"user{i}", password="x") for i in range(2)]
        self.low = Item.objects.create(locator="a", title="Alpha One", description="d")
        self.high = Item.objects.create(locator="b", title="Alpha Two", description="d")
        self.exact = Item.objects.create(locator="c", title="Alpha", description="d")
        Review.objects.create(item=self.low, user=users[0], rating=4)
        Review.objects.create(item=self.high, user=users[0], rating=9)
        Review.objects.create(item=self.exact, user=users[0], rating=1)
        Review.objects.create(item=self.exact, user=users[1], rating=1)

    def test_equal_similarity_falls_back_to_score(self):
        self.assertAlmostEqual(
            trigram_similarity("alpha", "Alpha One"), trigram_similarity("alpha", "Alpha Two")
        )
        page = list_items(query="alpha")
        # exact title first despite the lowest score, then ties by score
        self.assertEqual([item.locator for item in page.items], ["c", "b", "a"])

    def test_users_ordered_by_similarity(self):
        for name in ["alicia", "alicex", "bob", "alice"]:
            User.objects.create_user(name, password="x")
        page = list_users(query="alice")
        self.assertEqual([user.username for user in page.items], ["alice", "alicex", "alicia"])
