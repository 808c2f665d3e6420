from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from items.models import Item
from reviews.models import Review

ADMIN = "admin"
DEMO_USERS = ["test1", "test2", "test3", "test4", "test5", "test6"]

DEMO_ITEMS = [
    ("ergo_proxy", "Ergo Proxy", "Inside the domed city of Romdo, robots start to wake up."),
    ("steins_gate", "Steins;Gate", "A microwave that sends text messages into the past."),
    ("paranoia_agent", "Paranoia Agent", "A boy on rollerblades with a golden bat terrorizes Musashino."),
    ("chaos_head", "ChäoS;HEAd", "A shut-in otaku gets pulled into a string of murders in Shibuya."),
    ("spirited_away", "Spirited Away", "A ten-year-old girl has to work in a bathhouse for spirits."),
    ("psycho_pass", "Psycho-Pass", "Justice is decided by a system that reads minds."),
    ("bna", "BNA", "A girl turns into a tanuki and flees to a city of beastmen."),
    ("beastars", "Beastars", "A gray wolf in a school where carnivores and herbivores live together."),
    ("bungou_stray_dogs", "Bungou Stray Dogs", "An orphan joins an agency of gifted detectives."),
    ("flcl", "FLCL", "A sixth grader, a bass guitar and a robot growing out of his head."),
    ("neon_genesis_evangelion", "Neon Genesis Evangelion", "Teenagers pilot giant machines against the Angels."),
    ("the_melancholy_of_haruhi_suzumiya", "The Melancholy of Haruhi Suzumiya", "A club founded to find aliens, time travelers and espers."),
    ("watamote", "WataMote: No Matter How I Look At It, It's You Guys' Fault I'm Not Popular!", "A high schooler sets out to become popular and fails at every step."),
]

# (item locator, username, rating)
DEMO_REVIEWS = [
    ("ergo_proxy", ADMIN, 9),
    ("ergo_proxy", "test1", 8),
    ("ergo_proxy", "test2", 7),
    ("ergo_proxy", "test3", 9),
    ("steins_gate", ADMIN, 8),
    ("paranoia_agent", ADMIN, 3),
    ("chaos_head", ADMIN, 8),
]


class Command(BaseCommand):
    help = "Create or update the admin account, demo users, demo items and their reviews."

    def add_arguments(self, parser):
        parser.add_argument("--admin-password", default="admin", help="Password for the admin account.")
        parser.add_argument("--password", default="test", help="Password for the demo users.")

    @transaction.atomic
    def handle(self, *args, **options):
        User = get_user_model()

        admin, created = User.objects.get_or_create(username=ADMIN)
        admin.is_staff = True
        admin.is_superuser = True
        # set (or reset) password; seeding bypasses the strength policy
        admin.set_password(options["admin_password"])
        admin.save()
        self.stdout.write(self.style.SUCCESS(f"Created admin '{ADMIN}'") if created else f"Admin '{ADMIN}' already exists")

        for username in DEMO_USERS:
            user, created = User.objects.get_or_create(username=username)
            user.set_password(options["password"])
            user.save(update_fields=["password"])
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created user '{username}'"))

        for locator, title, description in DEMO_ITEMS:
            _, created = Item.objects.update_or_create(
                locator=locator, defaults={"title": title, "description": description}
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created item '{locator}'"))

        for locator, username, rating in DEMO_REVIEWS:
            Review.objects.update_or_create(
                item=Item.objects.get(locator=locator),
                user=User.objects.get(username=username),
                defaults={"rating": rating},
            )

        self.stdout.write(self.style.SUCCESS(
            f"Catalog ready: {Item.objects.count()} items, {Review.objects.count()} reviews."
        ))
