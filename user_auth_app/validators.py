"""Password strength policy.

Strength is zxcvbn's guess estimate on a 0-100 scale: ten points per order of
magnitude of guesses, capped at 10^10 guesses.
"""

from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _
from zxcvbn import zxcvbn

MAX_SCORE = 100


def password_score(password, user_inputs=()):
    """Return the 0-100 strength of `password`.

    `user_inputs` are strings (such as the username) that make a password
    easier to guess when it contains them.
    """
    if not password:
        return 0
    result = zxcvbn(password, user_inputs=[value for value in user_inputs if value])
    return min(MAX_SCORE, int(10 * float(result["guesses_log10"])))


class PasswordStrengthValidator:
    """Django password validator rejecting passwords below `min_score`."""

    def __init__(self, min_score=80):
        self.min_score = min_score

    def validate(self, password, user=None):
        username = getattr(user, "username", None) if user is not None else None
        if password_score(password, [username]) < self.min_score:
            raise ValidationError(
                _("This password is too easy to guess."),
                code="password_too_weak",
                params={"min_score": self.min_score},
            )

    def get_help_text(self):
        return _("Your password must be hard to guess (strength of at least %(min_score)d out of 100).") % {
            "min_score": self.min_score
        }
