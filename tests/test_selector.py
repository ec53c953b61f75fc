import pytest

from maptools.mapping.selector import MappingSelector
from maptools.mapping.types import ObjectMapping


class Boy:
    pass


class Girl:
    pass


class Dog:
    pass


class _Delegate:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def object_mapping_for_data(self, data):
        self.calls.append(data)
        return self.result


def _mappings():
    return ObjectMapping(Boy), ObjectMapping(Girl)


def test_empty_selector_resolves_none():
    sel = MappingSelector()
    assert sel.resolve({"type": "dog"}) is None
    assert sel.resolve([]) is None
    assert sel.resolve("text") is None


def test_single_rule_match():
    dog = ObjectMapping(Dog)
    sel = MappingSelector()
    sel.add_rule("type", "dog", dog)
    assert sel.resolve({"type": "dog"}) is dog


def test_gender_example():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.add_rule("gender", "female", girl)

    assert sel.resolve({"gender": "male"}) is boy
    assert sel.resolve({"gender": "female"}) is girl
    assert sel.resolve({"gender": "other"}) is None


def test_first_registered_rule_wins():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.add_rule("name", "sam", girl)
    assert sel.resolve({"gender": "male", "name": "sam"}) is boy


def test_duplicate_rules_are_appended():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.add_rule("gender", "male", girl)
    assert len(sel.rules) == 2
    assert sel.resolve({"gender": "male"}) is boy


def test_delegate_takes_precedence_over_rules():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.delegate = _Delegate(girl)
    assert sel.resolve({"gender": "male"}) is girl


def test_delegate_takes_precedence_over_callback():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.delegate = _Delegate(boy)
    sel.callback = lambda data: girl
    assert sel.resolve({}) is boy


def test_delegate_none_falls_back_to_callback_then_rules():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.delegate = _Delegate(None)
    sel.callback = lambda data: girl if data.get("gender") == "female" else None

    assert sel.resolve({"gender": "female"}) is girl
    assert sel.resolve({"gender": "male"}) is boy
    assert sel.resolve({"gender": "other"}) is None


def test_delegate_receives_payload():
    boy, _ = _mappings()
    delegate = _Delegate(boy)
    sel = MappingSelector()
    sel.delegate = delegate
    payload = {"gender": "male"}
    sel.resolve(payload)
    assert delegate.calls == [payload]
    assert delegate.calls[0] is payload


def test_delegate_errors_propagate():
    class Broken:
        def object_mapping_for_data(self, data):
            raise RuntimeError("classifier down")

    sel = MappingSelector()
    sel.delegate = Broken()
    with pytest.raises(RuntimeError, match="classifier down"):
        sel.resolve({})


def test_callback_errors_propagate():
    def boom(data):
        raise KeyError("missing")

    sel = MappingSelector()
    sel.callback = boom
    with pytest.raises(KeyError):
        sel.resolve({})


def test_resolve_is_idempotent():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.add_rule("gender", "female", girl)
    payload = {"gender": "female"}
    assert sel.resolve(payload) is sel.resolve(payload)
    assert len(sel.rules) == 2


def test_collection_flag_does_not_affect_resolution():
    boy, _ = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    before = sel.resolve({"gender": "male"})
    sel.force_collection_mapping = True
    assert sel.resolve({"gender": "male"}) is before


def test_copy_has_independent_rule_list():
    boy, girl = _mappings()
    sel = MappingSelector()
    sel.add_rule("gender", "male", boy)
    sel.force_collection_mapping = True

    clone = sel.copy()
    clone.add_rule("gender", "female", girl)

    assert len(sel.rules) == 1
    assert len(clone.rules) == 2
    assert clone.force_collection_mapping is True
    assert sel.resolve({"gender": "female"}) is None
    assert clone.resolve({"gender": "female"}) is girl


def test_none_rule_ignores_payloads_it_cannot_walk():
    null = ObjectMapping(Dog, name="Null")
    sel = MappingSelector()
    sel.add_rule("a.b", None, null)

    assert sel.resolve({"a": "scalar"}) is None
    assert sel.resolve("text") is None
    assert sel.resolve({"a": {"b": None}}) is null
    assert sel.resolve({"a": {}}) is null


def test_copy_does_not_share_expected_values():
    boy, _ = _mappings()
    expected = {"kind": ["kid"]}
    sel = MappingSelector()
    sel.add_rule("profile", expected, boy)

    clone = sel.copy()
    expected["kind"].append("adult")

    assert sel.resolve({"profile": {"kind": ["kid", "adult"]}}) is boy
    assert clone.resolve({"profile": {"kind": ["kid"]}}) is boy
    assert clone.rules[0].object_mapping is boy
