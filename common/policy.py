"""Authorization predicates.

Pure functions of the acting user (or None/anonymous) and the target. They
never look up request or session state; the API permission classes resolve
the actor and call these.
"""


def is_authenticated(actor) -> bool:
    return bool(actor is not None and actor.is_authenticated)


def is_admin(user) -> bool:
    return bool(is_authenticated(user) and user.is_staff)


def can_manage_items(actor) -> bool:
    """Adding, editing and removing items is admin-only."""
    return is_admin(actor)


def can_edit_user(actor, target) -> bool:
    """Users may edit themselves; admins may edit anyone."""
    if not is_authenticated(actor):
        return False
    return actor.pk == target.pk or actor.is_staff


def can_remove_user(actor, target) -> bool:
    """Like editing, except that admin accounts can never be removed."""
    return can_edit_user(actor, target) and not target.is_staff


def can_rate(actor) -> bool:
    """Any signed-in user may rate; reviews are always keyed to the actor."""
    return is_authenticated(actor)
