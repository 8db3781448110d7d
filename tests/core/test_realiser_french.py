# tests\core\test_realiser_french.py
import pytest

from nlg_realiser.core.domain.features import Form, Gender, InterrogativeType, NumberAgreement, Tense
from nlg_realiser.core.domain.syntax.common import compute_agreement, has_reflexive_object
from nlg_realiser.core.domain.syntax.french.clause import relative_pronoun_candidates


class TestFrenchQuestions:
    def test_what_object(self, fr_factory, fr_realiser):
        """"qu'est-ce que" keeps declarative order."""
        clause = fr_factory.create_clause("tu", "penser")
        clause.add_complement(fr_factory.create_preposition_phrase("sur", "Jean"))
        clause.set_feature("interrogative_type", InterrogativeType.WHAT_OBJECT)

        assert fr_realiser.realise_sentence(clause) == "Qu'est-ce que tu penses sur Jean?"

    def test_yes_no_elides_que(self, fr_factory, fr_realiser):
        """"que" elides before a vowel-initial subject."""
        clause = fr_factory.create_clause("il", "penser")
        clause.add_complement(fr_factory.create_preposition_phrase("à", "Jean"))
        clause.set_feature("interrogative_type", InterrogativeType.YES_NO)

        assert fr_realiser.realise_sentence(clause) == "Est-ce qu'il pense à Jean?"


class TestFrenchClitics:
    def test_third_person_clitic_order(self, fr_factory, fr_realiser):
        """A third-person indirect clitic follows the direct one."""
        clause = fr_factory.create_clause("je", "donner", "le")
        clause.set_indirect_object("lui")

        assert fr_realiser.realise_sentence(clause) == "Je le lui donne."

    def test_first_person_clitic_order(self, fr_factory, fr_realiser):
        """A first-person indirect clitic precedes the direct one."""
        clause = fr_factory.create_clause("Jean", "donner", "le")
        io = clause.set_indirect_object("me")
        io.set_feature("person", "first")

        assert fr_realiser.realise_sentence(clause) == "Jean me le donne."

    def test_negated_clitics(self, fr_factory, fr_realiser):
        """"ne" opens the group and "pas" follows the finite verb."""
        clause = fr_factory.create_clause("je", "donner", "le")
        clause.set_indirect_object("lui")
        clause.set_feature("negated", True)

        assert fr_realiser.realise_sentence(clause) == "Je ne le lui donne pas."

    def test_participle_agrees_with_preceding_clitic(self, fr_factory, fr_realiser):
        """With avoir the participle agrees with a direct-object clitic, which elides."""
        clause = fr_factory.create_clause("Jean", "donner", "la")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Jean l'a donnée."


class TestFrenchAgreement:
    def test_all_feminine_subjects(self, fr_factory, fr_realiser):
        """An être participle agrees with a feminine plural coordination."""
        subject = fr_factory.create_coordinated("Marie", "Julie")
        clause = fr_factory.create_clause(subject, "partir")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Marie et Julie sont parties."
        # agreement was computed on a copy
        assert clause.verb_phrase.get_feature("gender") is None

    def test_feminine_only_when_every_subject_is(self, fr_factory):
        clause = fr_factory.create_clause(fr_factory.create_coordinated("Marie", "Julie"), "partir")
        compute_agreement(clause, clause.verb_phrase, with_gender=True)

        assert clause.verb_phrase.get_feature("gender") is Gender.FEMININE
        assert clause.verb_phrase.get_feature("number") is NumberAgreement.PLURAL

        clause.set_subject(fr_factory.create_coordinated("Jean", "Marie"))
        compute_agreement(clause, clause.verb_phrase, with_gender=True)

        assert clause.verb_phrase.get_feature("gender") is Gender.MASCULINE

    def test_mixed_subjects_are_masculine(self, fr_factory, fr_realiser):
        subject = fr_factory.create_coordinated("Jean", "Marie")
        clause = fr_factory.create_clause(subject, "partir")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Jean et Marie sont partis."


class TestFrenchMorphophonology:
    def test_contraction(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "parler")
        clause.add_complement(
            fr_factory.create_preposition_phrase("de", fr_factory.create_noun_phrase("le", "livre"))
        )

        assert fr_realiser.realise_sentence(clause) == "Jean parle du livre."

    def test_elision_blocks_contraction(self, fr_factory, fr_realiser):
        """"le" elides before a vowel first, so "de" does not contract."""
        clause = fr_factory.create_clause("Jean", "parler")
        clause.add_complement(
            fr_factory.create_preposition_phrase("de", fr_factory.create_noun_phrase("le", "arbre"))
        )

        assert fr_realiser.realise_sentence(clause) == "Jean parle de l'arbre."


class TestFrenchTenses:
    def test_future(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "partir")
        clause.set_feature("tense", Tense.FUTURE)

        assert fr_realiser.realise_sentence(clause) == "Jean partira."

    def test_past_is_imperfect(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "donner", fr_factory.create_noun_phrase("un", "livre"))
        clause.set_feature("tense", Tense.PAST)

        assert fr_realiser.realise_sentence(clause) == "Jean donnait un livre."


class TestFrenchReflexives:
    def test_third_person_reflexive_clitic(self, fr_factory, fr_realiser):
        """A reflexive object surfaces as "se", never as "le" or "la"."""
        clause = fr_factory.create_clause("Marie", "laver", "se")

        assert fr_realiser.realise_sentence(clause) == "Marie se lave."

    def test_reflexive_perfect_takes_etre(self, fr_factory, fr_realiser):
        """The participle agrees with the subject and "se" elides before "est"."""
        clause = fr_factory.create_clause("Marie", "laver", "se")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Marie s'est lavée."

    def test_first_person_object_matching_subject_is_reflexive(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("je", "laver", "me")
        clause.get_object().set_feature("person", "first")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Je me suis lavé."

    def test_object_must_match_subject_in_person_and_number(self, fr_factory):
        clause = fr_factory.create_clause("je", "laver", "me")
        clause.get_object().set_feature("person", "first")
        compute_agreement(clause, clause.verb_phrase, with_gender=True)

        assert has_reflexive_object(clause.verb_phrase)

        clause.set_subject("nous")
        compute_agreement(clause, clause.verb_phrase, with_gender=True)

        assert not has_reflexive_object(clause.verb_phrase)


class TestFrenchAuxiliarySelection:
    def test_avoir_by_default(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "manger")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Jean a mangé."

    def test_etre_for_flagged_verbs(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "arriver")
        clause.set_feature("perfect", True)

        assert fr_realiser.realise_sentence(clause) == "Jean est arrivé."


class TestFrenchVerbGroup:
    def test_imperative_enclitics(self, fr_factory, fr_realiser):
        """Non-negated imperative clitics follow the verb, joined by hyphens."""
        clause = fr_factory.create_clause("tu", "donner", "le")
        clause.set_indirect_object("lui")
        clause.set_feature("form", Form.IMPERATIVE)

        assert fr_realiser.realise_sentence(clause) == "Donne-le-lui."

    def test_negated_imperative_keeps_proclitics(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("tu", "donner", "le")
        clause.set_indirect_object("lui")
        clause.set_feature("form", Form.IMPERATIVE)
        clause.set_feature("negated", True)

        assert fr_realiser.realise_sentence(clause) == "Ne le lui donne pas."

    def test_clitics_stay_with_the_infinitive_after_a_modal(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("je", "donner", "le")
        clause.set_indirect_object("lui")
        clause.set_feature("modal", "vouloir")

        assert fr_realiser.realise_sentence(clause) == "Je veux le lui donner."

    def test_passive_agrees_with_the_promoted_object(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "manger", fr_factory.create_noun_phrase("la", "pomme"))
        clause.set_feature("passive", True)

        assert fr_realiser.realise_sentence(clause) == "La pomme est mangée par Jean."

    def test_progressive(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "manger")
        clause.set_feature("progressive", True)

        assert fr_realiser.realise_sentence(clause) == "Jean est en train de manger."


class TestFrenchRelativeClauses:
    def test_prepositional_relative(self, fr_factory, fr_realiser):
        """"à" contracts with the feminine plural "lesquelles"."""
        women = fr_factory.create_noun_phrase("la", "femme")
        women.set_feature("number", "plural")
        relative = fr_factory.create_clause("Jean", "penser")
        pp = fr_factory.create_preposition_phrase("à", fr_factory.create_noun_phrase("la", "femme"))
        relative.add_complement(pp)
        relative.set_feature("relative_phrase", pp)
        women.add_post_modifier(relative)
        clause = fr_factory.create_clause("je", "voir", women)

        assert fr_realiser.realise_sentence(clause) == "Je vois les femmes auxquelles Jean pense."

    @pytest.mark.parametrize(
        "gender, number, expected",
        [
            (
                Gender.FEMININE,
                NumberAgreement.PLURAL,
                [
                    (Gender.FEMININE, NumberAgreement.PLURAL),
                    (Gender.FEMININE, NumberAgreement.SINGULAR),
                    (Gender.MASCULINE, NumberAgreement.PLURAL),
                    (Gender.MASCULINE, NumberAgreement.SINGULAR),
                ],
            ),
            (
                Gender.MASCULINE,
                NumberAgreement.PLURAL,
                [(Gender.MASCULINE, NumberAgreement.PLURAL), (Gender.MASCULINE, NumberAgreement.SINGULAR)],
            ),
            (Gender.MASCULINE, NumberAgreement.SINGULAR, [(Gender.MASCULINE, NumberAgreement.SINGULAR)]),
        ],
    )
    def test_relative_pronoun_candidates(self, gender, number, expected):
        assert relative_pronoun_candidates(gender, number) == expected

    def test_feminine_determiner_variant_resolves_to_le(self, fr_factory):
        np = fr_factory.create_noun_phrase("la", "femme")

        assert np.specifier.base_form == "le"
