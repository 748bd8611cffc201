from presence.audience import OthersOnly, Target, ToAll, ToSelf

ACTIVE = ["a", "b", "c"]


def test_to_self():
    assert ToSelf().resolve("b", ACTIVE) == ["b"]


def test_others_only():
    assert OthersOnly().resolve("b", ACTIVE) == ["a", "c"]


def test_to_all():
    assert ToAll().resolve("b", ACTIVE) == ACTIVE


def test_target_present_and_gone():
    assert Target("c").resolve("a", ACTIVE) == ["c"]
    assert Target("zzz").resolve("a", ACTIVE) == []


def test_to_self_after_departure():
    assert ToSelf().resolve("gone", ACTIVE) == []
