import random

from directory import Directory


def test_register_canonicalizes_name():
    directory = Directory()
    user = directory.register("sam smith", "password1")
    assert user is not None
    assert user.name == "Sam Smith"
    assert directory.user_by_id(user.id) is user
    assert user.id in directory


def test_register_rejects_bad_input():
    directory = Directory()
    assert directory.register("", "password1") is None
    assert directory.register(None, "password1") is None
    assert directory.register("sam", None) is None
    assert directory.register("sam", "short") is None
    assert directory.register("sam", "x" * 21) is None
    assert directory.user_count == 0


def test_register_retries_on_id_collision():
    ids = iter(["aaaaaaaaaaaa", "aaaaaaaaaaaa", "aaaaaaaaaaaa", "bbbbbbbbbbbb"])
    directory = Directory(id_factory=lambda: next(ids))
    first = directory.register("ann", "password1")
    second = directory.register("bob", "password2")
    assert first.id == "aaaaaaaaaaaa"
    assert second.id == "bbbbbbbbbbbb"
    assert directory.user_count == 2


def test_many_registrations_get_distinct_ids():
    # a tiny id space forces plenty of collisions
    rng = random.Random(7)
    directory = Directory(id_factory=lambda: str(rng.randrange(600)))
    users = [directory.register("user", "password1") for _ in range(500)]
    assert len({u.id for u in users}) == 500
    assert directory.user_count == 500


def test_authenticate():
    directory = Directory()
    user = directory.register("sam", "password1")
    assert directory.authenticate(user.id, "Sam", "password1")
    assert not directory.authenticate(user.id, "sam", "password1")
    assert not directory.authenticate(user.id, "Sam", "password2")
    assert not directory.authenticate("missing", "Sam", "password1")
    assert not directory.authenticate(None, "Sam", "password1")
    assert not directory.authenticate(user.id, None, "password1")
    assert not directory.authenticate(user.id, "Sam", None)


def test_user_by_id_unknown():
    assert Directory().user_by_id("nope") is None
    assert Directory().user_by_id(None) is None
