from devconnect.services.profile import UNSET, ProfileFields, split_skills


def test_only_present_keys_are_set():
    data = {"handle": " jane ", "company": None, "bio": "hi", "youtube": None}
    fields = ProfileFields.from_input(data, present={"handle", "company"})

    assert fields.handle == "jane"
    assert fields.company is None
    assert fields.bio is UNSET
    assert fields.changes() == {"handle": "jane", "company": None}
    assert fields.social_changes() == {}


def test_empty_string_means_clear_not_unset():
    fields = ProfileFields.from_input({"location": "  ", "twitter": ""}, present={"location", "twitter"})
    assert fields.changes() == {"location": None}
    assert fields.social_changes() == {"twitter": None}


def test_unknown_keys_are_ignored():
    fields = ProfileFields.from_input({"handle": "jane", "user_id": 5}, present={"handle", "user_id"})
    assert fields.changes() == {"handle": "jane"}


def test_split_skills():
    assert split_skills("python, sql ,, go ") == ["python", "sql", "go"]
    assert split_skills(["a ", " b"]) == ["a", "b"]
    assert split_skills(None) == []


def test_unset_is_a_single_falsy_marker():
    assert not UNSET
    assert repr(UNSET) == "UNSET"
    assert type(UNSET)() is UNSET
