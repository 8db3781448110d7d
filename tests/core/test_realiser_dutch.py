# tests\core\test_realiser_dutch.py
from nlg_realiser.core.domain.features import ClauseStatus, InterrogativeType, Tense


def _jij_clause(factory, verb, obj=None):
    clause = factory.create_clause("jij", verb, obj)
    clause.subjects[0].set_feature("person", "second")
    return clause


class TestDutchQuestions:
    def test_why_question(self, nl_factory, nl_realiser):
        """WHY keeps the subject right after the inverted verb."""
        clause = _jij_clause(nl_factory, "denk")
        clause.add_complement(nl_factory.create_preposition_phrase("over", "Jan"))
        clause.set_feature("interrogative_type", InterrogativeType.WHY)

        assert nl_realiser.realise_sentence(clause) == "Waarom denk jij over Jan?"

    def test_what_subject_future_perfect(self, nl_factory, nl_realiser):
        """The finite auxiliary is second, the non-finite cluster last."""
        clause = _jij_clause(nl_factory, "motiveren", "Jan")
        clause.set_feature("tense", Tense.FUTURE)
        clause.set_feature("perfect", True)
        clause.set_feature("interrogative_type", InterrogativeType.WHAT_SUBJECT)

        assert nl_realiser.realise_sentence(clause) == "Wat zal Jan hebben gemotiveerd?"

    def test_how_adjective_relocates_adjective(self, nl_factory, nl_realiser):
        """The predicative adjective moves in front of the verb."""
        clause = nl_factory.create_clause("Jan", "zijn")
        clause.set_object(nl_factory.create_adjective_phrase("slim"))
        clause.set_feature("interrogative_type", InterrogativeType.HOW_ADJECTIVE)

        assert nl_realiser.realise_sentence(clause) == "Hoe slim is Jan?"

    def test_whose_relocates_object(self, nl_factory, nl_realiser):
        """WHOSE puts the possessed object right after "wiens"."""
        clause = _jij_clause(nl_factory, "krijgen", "sleutels")
        clause.set_feature("perfect", True)
        clause.set_feature("interrogative_type", InterrogativeType.WHOSE)

        assert nl_realiser.realise_sentence(clause) == "Wiens sleutels heb jij gekregen?"

    def test_who_indirect_object(self, nl_factory, nl_realiser):
        """The indirect-object preposition opens the question."""
        clause = _jij_clause(nl_factory, "presenteren", "Jan")
        clause.set_indirect_object("Marie")
        clause.set_feature("tense", Tense.FUTURE)
        clause.set_feature("interrogative_type", InterrogativeType.WHO_INDIRECT_OBJECT)

        assert nl_realiser.realise_sentence(clause) == "Aan wie zal jij Jan presenteren?"

    def test_who_subject(self, nl_factory, nl_realiser):
        """A subject question agrees in the third person singular."""
        clause = _jij_clause(nl_factory, "denken")
        clause.add_complement(nl_factory.create_preposition_phrase("aan", "Jan"))
        clause.set_feature("interrogative_type", InterrogativeType.WHO_SUBJECT)

        assert nl_realiser.realise_sentence(clause) == "Wie denkt aan Jan?"

    def test_how_many(self, nl_factory, nl_realiser):
        """A bare indirect object becomes an "aan" phrase after the subject."""
        clause = _jij_clause(nl_factory, "geven", "computers")
        clause.set_indirect_object("Jan")
        clause.set_feature("interrogative_type", InterrogativeType.HOW_MANY)

        assert nl_realiser.realise_sentence(clause) == "Hoeveel computers geef jij aan Jan?"

    def test_which(self, nl_factory, nl_realiser):
        clause = _jij_clause(nl_factory, "hebben", "gedachten")
        clause.add_complement(nl_factory.create_preposition_phrase("over", "Jan"))
        clause.set_feature("interrogative_type", InterrogativeType.WHICH)

        assert nl_realiser.realise_sentence(clause) == "Welke gedachten heb jij over Jan?"

    def test_why_irregular_verb(self, nl_factory, nl_realiser):
        """An inverted "jij" takes the first person form of "doen"."""
        clause = _jij_clause(nl_factory, "doen", "dat")
        clause.set_feature("interrogative_type", InterrogativeType.WHY)

        assert nl_realiser.realise_sentence(clause) == "Waarom doe jij dat?"

    def test_how_come_future(self, nl_factory, nl_realiser):
        """With an auxiliary, complements precede the infinitive."""
        clause = _jij_clause(nl_factory, "denken")
        clause.add_complement(nl_factory.create_preposition_phrase("over", "Jan"))
        clause.set_feature("tense", Tense.FUTURE)
        clause.set_feature("interrogative_type", InterrogativeType.HOW_COME)

        assert nl_realiser.realise_sentence(clause) == "Hoezo zal jij over Jan denken?"

    def test_yes_no(self, nl_factory, nl_realiser):
        clause = _jij_clause(nl_factory, "denk")
        clause.add_complement(nl_factory.create_preposition_phrase("over", "Jan"))
        clause.set_feature("interrogative_type", InterrogativeType.YES_NO)

        assert nl_realiser.realise_sentence(clause) == "Denk jij over Jan?"


class TestDutchStatements:
    def test_future_statement(self, nl_factory, nl_realiser):
        """Uninverted second person uses the "-t" form of zullen."""
        clause = _jij_clause(nl_factory, "motiveren", "Jan")
        clause.set_feature("tense", Tense.FUTURE)

        assert nl_realiser.realise_sentence(clause) == "Jij zult Jan motiveren."

    def test_present_third_person(self, nl_factory, nl_realiser):
        clause = nl_factory.create_clause("Jan", "geven", "sleutels")
        clause.set_indirect_object("Marie")

        assert nl_realiser.realise_sentence(clause) == "Jan geeft sleutels aan Marie."

    def test_past_strong_plural(self, nl_factory, nl_realiser):
        """A coordinated subject takes the plural of the strong past."""
        subject = nl_factory.create_coordinated("Jan", "Marie")
        clause = nl_factory.create_clause(subject, "krijgen", "sleutels")
        clause.set_feature("tense", Tense.PAST)

        assert nl_realiser.realise_sentence(clause) == "Jan en Marie kregen sleutels."

    def test_negated_perfect(self, nl_factory, nl_realiser):
        """"niet" follows the finite auxiliary."""
        clause = nl_factory.create_clause("Jan", "werken")
        clause.set_feature("perfect", True)
        clause.set_feature("negated", True)

        assert nl_realiser.realise_sentence(clause) == "Jan heeft niet gewerkt."

    def test_separable_verb_splits_when_finite(self, nl_factory, nl_realiser):
        """The preverb of a finite separable verb goes after the object."""
        clause = nl_factory.create_clause("Jan", "opbellen", "Marie")

        assert nl_realiser.realise_sentence(clause) == "Jan belt Marie op."

    def test_separable_verb_participle(self, nl_factory, nl_realiser):
        clause = nl_factory.create_clause("Jan", "opbellen", "Marie")
        clause.set_feature("perfect", True)

        assert nl_realiser.realise_sentence(clause) == "Jan heeft Marie opgebeld."


class TestDutchResult:
    def test_result_carries_tokens(self, nl_factory, nl_realiser):
        """realise_result exposes the surface tokens alongside the text."""
        clause = _jij_clause(nl_factory, "denk")
        clause.add_complement(nl_factory.create_preposition_phrase("over", "Jan"))
        clause.set_feature("interrogative_type", InterrogativeType.WHY)

        result = nl_realiser.realise_result(clause)

        assert result.language == "nl"
        assert result.interrogative is True
        assert result.tokens == ["waarom", "denk", "jij", "over", "Jan"]
        assert result.text == "Waarom denk jij over Jan?"

    def test_nothing_to_realise(self, nl_realiser):
        """An empty input gives an empty sentence, not an error."""
        assert nl_realiser.realise_sentence(None) == ""


class TestDutchVerbGroup:
    def test_reflexive_object(self, nl_factory, nl_realiser):
        clause = nl_factory.create_clause("Jan", "wassen", "zich")

        assert nl_realiser.realise_sentence(clause) == "Jan wast zich."

    def test_passive_with_worden(self, nl_factory, nl_realiser):
        """The agent follows the verb phrase as a "door" phrase."""
        clause = nl_factory.create_clause("Jan", "wassen", nl_factory.create_noun_phrase("het", "boek"))
        clause.set_feature("passive", True)

        assert nl_realiser.realise_sentence(clause) == "Het boek wordt gewassen door Jan."

    def test_progressive(self, nl_factory, nl_realiser):
        clause = nl_factory.create_clause("Jan", "werken")
        clause.set_feature("progressive", True)

        assert nl_realiser.realise_sentence(clause) == "Jan is aan het werken."

    def test_subordinate_clause_is_verb_final(self, nl_factory, nl_realiser):
        """In a subordinate clause the separable verb stays whole and last."""
        embedded = nl_factory.create_clause("Marie", "opbellen", "Jan")
        embedded.set_feature("clause_status", ClauseStatus.SUBORDINATE)
        clause = nl_factory.create_clause("Jan", "denken")
        clause.add_complement(embedded)

        assert nl_realiser.realise_sentence(clause) == "Jan denkt dat Marie Jan opbelt."
