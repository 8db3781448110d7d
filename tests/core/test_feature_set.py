# tests\core\test_feature_set.py
import pytest

from nlg_realiser.core.domain.exceptions import UnsupportedInterrogativeError
from nlg_realiser.core.domain.feature_set import FeatureSet, feature_key
from nlg_realiser.core.domain.features import (
    InterrogativeType,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
)


class TestTypedFields:
    def test_strings_are_coerced_to_enums(self):
        fs = FeatureSet()
        fs.set("tense", "past")
        fs.set("NUMBER", "Plural")

        assert fs.tense is Tense.PAST
        assert fs.number is NumberAgreement.PLURAL

    def test_unknown_enum_value_raises(self):
        with pytest.raises(ValueError):
            FeatureSet().set("tense", "someday")

    def test_interrogative_type_is_closed(self):
        """Anything outside the supported question types is rejected."""
        fs = FeatureSet()
        fs.set("interrogative_type", "WHO_OBJECT")

        assert fs.interrogative_type is InterrogativeType.WHO_OBJECT
        with pytest.raises(UnsupportedInterrogativeError):
            fs.set("interrogative_type", "what_for")

    def test_boolean_strings(self):
        fs = FeatureSet()
        fs.set("negated", "yes")
        fs.set("passive", "false")

        assert fs.negated is True
        assert fs.passive is False

    def test_explicit_false_is_not_unset(self):
        fs = FeatureSet()
        fs.set("perfect", False)

        assert fs.has("perfect")
        assert not fs.flag("perfect")
        assert not FeatureSet().has("perfect")

    def test_unset_reads_as_default(self):
        fs = FeatureSet()

        assert fs.get("person") is None
        assert fs.get("person", Person.THIRD) is Person.THIRD


class TestExtraMap:
    def test_open_keys_go_to_extra(self):
        fs = FeatureSet()
        fs.set(LexicalFeature.PAST, "gave")

        assert fs.extra == {"past": "gave"}
        assert fs.get("past") == "gave"
        assert fs.get_extra(LexicalFeature.PAST) == "gave"

    def test_setting_none_removes(self):
        fs = FeatureSet()
        fs.set_extra("preverb", "op")
        fs.set("preverb", None)
        fs.set("tense", "future")
        fs.remove("tense")

        assert fs.extra == {}
        assert fs.tense is None


class TestBulkOperations:
    def test_items_list_typed_fields_first(self):
        fs = FeatureSet.from_mapping({"past": "gave", "tense": "past", "negated": True})

        assert list(fs.items()) == [("tense", Tense.PAST), ("negated", True), ("past", "gave")]

    def test_copy_is_independent(self):
        fs = FeatureSet.from_mapping({"number": "plural", "plural": "children"})
        clone = fs.copy()
        clone.set("number", "singular")
        clone.set_extra("plural", "kids")

        assert fs.number is NumberAgreement.PLURAL
        assert fs.get_extra("plural") == "children"

    def test_update_from_overwrites_set_features_only(self):
        fs = FeatureSet.from_mapping({"tense": "past", "person": "first"})
        fs.update_from(FeatureSet.from_mapping({"person": "second", "modal": "can"}))

        assert fs.tense is Tense.PAST
        assert fs.person is Person.SECOND
        assert fs.modal == "can"

    def test_typed_keys_exclude_extra(self):
        assert "tense" in FeatureSet.typed_keys()
        assert "extra" not in FeatureSet.typed_keys()

    def test_feature_key(self):
        assert feature_key(Tense.PAST) == "past"
        assert feature_key("Finite") == "finite"
