# tests\core\test_realiser_english.py
from nlg_realiser.core.domain.features import DiscourseFunction, Form, InterrogativeType, Tense


def _you_think_about_john(factory):
    clause = factory.create_clause("you", "think")
    clause.add_complement(factory.create_preposition_phrase("about", "John"))
    return clause


class TestEnglishQuestions:
    def test_what_object_uses_do_support(self, en_factory, en_realiser):
        """A bare present verb needs "do" to invert."""
        clause = _you_think_about_john(en_factory)
        clause.set_feature("interrogative_type", InterrogativeType.WHAT_OBJECT)

        assert en_realiser.realise_sentence(clause) == "What do you think about John?"

    def test_yes_no(self, en_factory, en_realiser):
        clause = _you_think_about_john(en_factory)
        clause.set_feature("interrogative_type", InterrogativeType.YES_NO)

        assert en_realiser.realise_sentence(clause) == "Do you think about John?"

    def test_who_subject_does_not_invert(self, en_factory, en_realiser):
        """Subject questions keep declarative order and the third person."""
        clause = _you_think_about_john(en_factory)
        clause.set_feature("interrogative_type", InterrogativeType.WHO_SUBJECT)

        assert en_realiser.realise_sentence(clause) == "Who thinks about John?"

    def test_be_inverts_without_do(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "be")
        clause.set_object(en_factory.create_adjective_phrase("happy"))
        clause.set_feature("interrogative_type", InterrogativeType.YES_NO)

        assert en_realiser.realise_sentence(clause) == "Is John happy?"

    def test_whose_perfect(self, en_factory, en_realiser):
        """The possessed object follows "whose"; the participle is irregular."""
        clause = en_factory.create_clause("you", "get", "keys")
        clause.set_feature("perfect", True)
        clause.set_feature("interrogative_type", InterrogativeType.WHOSE)

        assert en_realiser.realise_sentence(clause) == "Whose keys have you gotten?"


class TestEnglishStatements:
    def test_infinitival_complement(self, en_factory, en_realiser):
        """An infinitive verb phrase complement is introduced by "to"."""
        clause = en_factory.create_clause("Julia", "want")
        infinitive = en_factory.create_verb_phrase("dance")
        infinitive.set_feature("form", Form.INFINITIVE)
        clause.add_complement(infinitive)

        assert en_realiser.realise_sentence(clause) == "Julia wants to dance."

    def test_double_object_order(self, en_factory, en_realiser):
        """Indirect object first, and "a" becomes "an" before a vowel."""
        clause = en_factory.create_clause("John", "give", en_factory.create_noun_phrase("a", "apple"))
        clause.set_indirect_object("Mary")

        assert en_realiser.realise_sentence(clause) == "John gives Mary an apple."

    def test_negation_with_do(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "think")
        clause.add_complement(en_factory.create_preposition_phrase("about", "Mary"))
        clause.set_feature("negated", True)

        assert en_realiser.realise_sentence(clause) == "John does not think about Mary."

    def test_past_perfect(self, en_factory, en_realiser):
        clause = en_factory.create_clause("Mary", "see", "John")
        clause.set_feature("tense", Tense.PAST)
        clause.set_feature("perfect", True)

        assert en_realiser.realise_sentence(clause) == "Mary had seen John."

    def test_future(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "dance")
        clause.set_feature("tense", Tense.FUTURE)

        assert en_realiser.realise_sentence(clause) == "John will dance."

    def test_past_modal(self, en_factory, en_realiser):
        """A modal in the past tense takes its lexical past form."""
        clause = en_factory.create_clause("Julia", "dance")
        clause.set_feature("modal", "can")
        clause.set_feature("tense", Tense.PAST)

        assert en_realiser.realise_sentence(clause) == "Julia could dance."

    def test_plural_subject_agreement(self, en_factory, en_realiser):
        """An irregular plural noun still makes the verb plural."""
        obj = en_factory.create_noun_phrase("the", "dog")
        obj.set_feature("number", "plural")
        clause = en_factory.create_clause(en_factory.create_noun_phrase("the", "men"), "see", obj)

        assert en_realiser.realise_sentence(clause) == "The men see the dogs."

    def test_pronoun_object_form(self, en_factory, en_realiser):
        """A subject pronoun used as object is realised in its object form."""
        clause = en_factory.create_clause("John", "see", "she")

        assert en_realiser.realise_sentence(clause) == "John sees her."

    def test_vowel_initial_flag_overrides_spelling(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "see", en_factory.create_noun_phrase("a", "university"))
        other = en_factory.create_clause("John", "see", en_factory.create_noun_phrase("a", "hour"))

        assert en_realiser.realise_sentence(clause) == "John sees a university."
        assert en_realiser.realise_sentence(other) == "John sees an hour."


class TestEnglishRelativeClauses:
    def test_object_relative_drops_the_object(self, en_factory, en_realiser):
        """The relativised object surfaces only as "which"."""
        book = en_factory.create_noun_phrase("the", "book")
        relative = en_factory.create_clause("John", "read", en_factory.create_noun_phrase("the", "book"))
        relative.set_feature("relative_phrase", DiscourseFunction.OBJECT)
        book.add_post_modifier(relative)
        clause = en_factory.create_clause("Mary", "like", book)

        assert en_realiser.realise_sentence(clause) == "Mary likes the book which John reads."

    def test_subject_relative_with_human_antecedent(self, en_factory, en_realiser):
        man = en_factory.create_noun_phrase("the", "man")
        relative = en_factory.create_clause(verb="dance")
        relative.set_feature("relative_phrase", DiscourseFunction.SUBJECT)
        man.add_post_modifier(relative)
        clause = en_factory.create_clause(man, "see", "John")

        assert en_realiser.realise_sentence(clause) == "The man who dances sees John."


class TestEnglishVoice:
    def test_passive_with_agent(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "eat", en_factory.create_noun_phrase("the", "apple"))
        clause.set_feature("passive", True)

        assert en_realiser.realise_sentence(clause) == "The apple is eaten by John."

    def test_reflexive_object(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "wash", "himself")

        assert en_realiser.realise_sentence(clause) == "John washes himself."

    def test_progressive(self, en_factory, en_realiser):
        clause = en_factory.create_clause("John", "eat")
        clause.set_feature("progressive", True)

        assert en_realiser.realise_sentence(clause) == "John is eating."

    def test_clausal_subject_is_wrapped(self, en_factory, en_realiser):
        """A clause used as subject becomes "the fact that ..."."""
        subject = en_factory.create_clause("John", "dance")
        clause = en_factory.create_clause(subject, "surprise", "Mary")

        assert en_realiser.realise_sentence(clause) == "The fact that John dances surprises Mary."
