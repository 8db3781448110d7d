# tests\core\test_verb_group.py
from nlg_realiser.core.domain.elements import WordElement
from nlg_realiser.core.domain.features import LexicalCategory
from nlg_realiser.core.domain.syntax.verb_group import VerbGroup, VerbSlot


def _verb(base):
    return WordElement(base, LexicalCategory.VERB)


def _adverb(base):
    return WordElement(base, LexicalCategory.ADVERB)


def _clitic(base):
    word = WordElement(base, LexicalCategory.PRONOUN)
    word.set_feature("clitic", True)
    return word


def _slots(group):
    return [(e.element.base_form, e.slot) for e in group.entries]


class TestPushClassification:
    def test_clitics_and_ne_stay_with_the_main_verb(self):
        """"ne le lui a pas donné": everything up to "ne" is MAIN."""
        group = VerbGroup()
        for element in (_verb("donné"), _clitic("lui"), _clitic("le"), _adverb("ne"), _verb("a"), _adverb("pas")):
            group.push(element)

        assert _slots(group) == [
            ("donné", VerbSlot.MAIN),
            ("lui", VerbSlot.MAIN),
            ("le", VerbSlot.MAIN),
            ("ne", VerbSlot.MAIN),
            ("a", VerbSlot.AUX),
            ("pas", VerbSlot.AUX),
        ]

    def test_adverbs_before_the_main_verb_are_main(self):
        group = VerbGroup()
        group.push(_adverb("snel"))
        group.push(_verb("werken"))
        group.push(_verb("zal"))

        assert [e.base_form for e in group.main] == ["werken", "snel"]
        assert [e.base_form for e in group.auxiliaries] == ["zal"]

    def test_auxiliary_switch_is_permanent(self):
        """Once a token went to AUX, later clitics do too."""
        group = VerbGroup()
        group.push(_verb("think"))
        group.push(_verb("do"))
        group.push(_clitic("le"))

        assert group.entries[-1].slot is VerbSlot.AUX

    def test_explicit_main_slot(self):
        """Non-finite auxiliaries can be kept in the clause-final cluster."""
        group = VerbGroup()
        group.push(_verb("gemotiveerd"))
        group.push(_verb("hebben"), VerbSlot.MAIN)
        group.push(_verb("zal"))

        assert [e.base_form for e in group.main] == ["hebben", "gemotiveerd"]
        assert [e.base_form for e in group.auxiliaries] == ["zal"]

    def test_none_is_ignored(self):
        group = VerbGroup()
        group.push(None)

        assert len(group) == 0


class TestViews:
    def test_surface_is_reverse_push_order(self):
        group = VerbGroup()
        main, aux = _verb("seen"), _verb("had")
        group.push(main)
        group.push(aux)

        assert group.stack == [main, aux]
        assert group.surface == [aux, main]

    def test_finite_is_first_flagged_surface_token(self):
        group = VerbGroup()
        main, aux = _verb("gewerkt"), _verb("heeft")
        aux.features.set_extra("finite", True)
        group.push(main)

        assert group.finite is None

        group.push(aux)

        assert group.finite is aux

    def test_insert_before_takes_the_anchor_slot(self):
        group = VerbGroup()
        main, aux, neg = _verb("gewerkt"), _verb("heeft"), _adverb("niet")
        group.push(main)
        group.push(aux)
        group.insert_before(aux, neg)

        assert group.stack == [main, neg, aux]
        assert group.entries[1].slot is VerbSlot.AUX
        assert group.index_of(neg) == 1

    def test_insert_before_missing_anchor_appends(self):
        group = VerbGroup()
        main = _verb("werkt")
        group.push(main)
        group.insert_before(_verb("elsewhere"), _adverb("niet"))

        assert group.index_of(main) == 0
        assert len(group) == 2
