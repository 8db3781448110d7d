# nlg_realiser\core\domain\syntax\french\clause.py
"""
French clauses.

Questions use the "est-ce que" forms and keep declarative word order, so
no subject is ever spliced into the verb group. "Combien de" and "quel"
questions carry their object between the question word and "est-ce que".
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ...elements import ClauseSpec, ListElement, NLGElement, PrepositionPhraseSpec
from ...features import (
    ClauseStatus,
    DiscourseFunction,
    Form,
    Gender,
    InterrogativeType,
    LexicalCategory,
    NumberAgreement,
    PronounType,
)
from ..base import SyntaxContext
from ..common import (
    agent_phrase,
    antecedent_of,
    check_clausal_subjects,
    compute_agreement,
    copy_front_modifiers,
    embedded_imperative_to_infinitive,
    emit_key_words,
    propagate_clause_features,
    realise_into,
    realise_subjects,
    relativised_function,
    surface_subjects,
)

IT = InterrogativeType

# (words before the object slot, words after it)
QUESTION_FORMS: Dict[InterrogativeType, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    IT.YES_NO: ((), ("est-ce que",)),
    IT.WHO_SUBJECT: (("qui",), ()),
    IT.WHAT_SUBJECT: (("qu'est-ce qui",), ()),
    IT.WHO_OBJECT: (("qui",), ("est-ce que",)),
    IT.WHO_INDIRECT_OBJECT: (("qui",), ("est-ce que",)),
    IT.WHAT_OBJECT: (("qu'est-ce que",), ()),
    IT.WHERE: (("où",), ("est-ce que",)),
    IT.WHY: (("pourquoi",), ("est-ce que",)),
    IT.WHEN: (("quand",), ("est-ce que",)),
    IT.HOW: (("comment",), ("est-ce que",)),
    IT.HOW_CONDITION_QUALITY: (("comment",), ("est-ce que",)),
    IT.HOW_ADJECTIVE: (("à quel point",), ("est-ce que",)),
    IT.HOW_MANY: (("combien de",), ("est-ce que",)),
    IT.WHICH: ((), ("est-ce que",)),
    IT.WHOSE: (("de qui",), ("est-ce que",)),
    IT.HOW_COME: (("comment ça se fait que",), ()),
}

# question types that pull their object in front of "est-ce que"
OBJECT_FRONTING = (IT.HOW_MANY, IT.WHICH)

DEFAULT_PREPOSITION = "à"


def relative_pronoun_candidates(gender: Gender, number: NumberAgreement) -> List[Tuple[Gender, NumberAgreement]]:
    """
    Fallback order for "lequel" forms: feminine plural, feminine singular,
    plural, masculine singular.
    """
    feminine = gender is Gender.FEMININE
    plural = number is NumberAgreement.PLURAL
    out: List[Tuple[Gender, NumberAgreement]] = []
    if feminine and plural:
        out.append((Gender.FEMININE, NumberAgreement.PLURAL))
    if feminine:
        out.append((Gender.FEMININE, NumberAgreement.SINGULAR))
    if plural:
        out.append((Gender.MASCULINE, NumberAgreement.PLURAL))
    out.append((Gender.MASCULINE, NumberAgreement.SINGULAR))
    return out


class FrenchClauseHelper:
    agent_preposition = "par"

    def realise(self, clause: ClauseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        vp = clause.verb_phrase
        propagate_clause_features(clause, vp)
        check_clausal_subjects(clause, ctx, "le", "fait")
        compute_agreement(clause, vp, with_gender=True)
        embedded_imperative_to_infinitive(clause)
        copy_front_modifiers(clause, vp)

        out = ListElement(source=clause)
        it = clause.features.interrogative_type
        form = clause.get_feature("form", Form.NORMAL)

        self._complementiser(clause, out, ctx)
        if clause.cue_phrase is not None and form is not Form.INFINITIVE:
            out.add(ctx.realise(clause.cue_phrase))

        object_slot = -1
        if it is not None:
            lead, tail = QUESTION_FORMS[it]
            if it is IT.WHO_INDIRECT_OBJECT:
                emit_key_words(out, ctx, self._io_preposition(clause))
            emit_key_words(out, ctx, *lead)
            object_slot = len(out.components)
            emit_key_words(out, ctx, *tail)
        else:
            realise_into(out, clause.front_modifiers, ctx, DiscourseFunction.FRONT_MODIFIER)

        if self._shows_subjects(clause, form, it):
            out.add(realise_subjects(surface_subjects(clause), ctx))

        vp_list = ctx.realise(vp)
        out.add(vp_list)

        if it in OBJECT_FRONTING and vp_list is not None:
            self._front_object(out, vp_list, object_slot, it, ctx)

        out.add(agent_phrase(clause, ctx, self.agent_preposition))
        realise_into(out, clause.post_modifiers, ctx, DiscourseFunction.POST_MODIFIER)
        return out if out.components else None

    # ------------------------------------------------------------------

    @staticmethod
    def _shows_subjects(clause: ClauseSpec, form: Form, it: Optional[InterrogativeType]) -> bool:
        if form in (Form.IMPERATIVE, Form.INFINITIVE):
            return False
        if it is not None and it.is_subject:
            return False
        return relativised_function(clause) is not DiscourseFunction.SUBJECT

    @staticmethod
    def _io_preposition(clause: ClauseSpec) -> str:
        io = clause.get_indirect_object()
        if isinstance(io, PrepositionPhraseSpec) and io.preposition is not None:
            return getattr(io.preposition, "base_form", DEFAULT_PREPOSITION)
        return DEFAULT_PREPOSITION

    @staticmethod
    def _front_object(out: ListElement, vp_list: ListElement, slot: int,
                      it: InterrogativeType, ctx: SyntaxContext) -> None:
        target = None
        for component in vp_list.components:
            if component.discourse_function is DiscourseFunction.OBJECT:
                target = component
                break
        if target is None:
            return
        vp_list.remove(target)
        if isinstance(target, ListElement) and it is IT.WHICH:
            # "quel" replaces the object's determiner
            target.components = [c for c in target.components
                                 if not c.is_a(LexicalCategory.DETERMINER)]
        out.insert(slot, target)
        if it is IT.WHICH:
            quel = ctx.inflect("quel", LexicalCategory.DETERMINER)
            quel.set_feature("gender", target.get_feature("gender", Gender.MASCULINE))
            quel.set_feature("number", target.get_feature("number", NumberAgreement.SINGULAR))
            out.insert(slot, quel)

    def _complementiser(self, clause: ClauseSpec, out: ListElement, ctx: SyntaxContext) -> None:
        relative = clause.get_feature("relative_phrase")
        if relative is not None:
            self._relative_pronoun(clause, relative, out, ctx)
            return
        wants = (clause.get_feature("clause_status") is ClauseStatus.SUBORDINATE
                 or clause.get_feature("form") is Form.SUBJUNCTIVE)
        if not wants or clause.flag("suppressed_complementiser"):
            return
        value = clause.get_feature("complementiser") or "que"
        if isinstance(value, NLGElement):
            out.add(ctx.realise(value))
            return
        token = ctx.inflect(str(value), LexicalCategory.COMPLEMENTISER, parent=clause)
        token.set_feature("discourse_function", DiscourseFunction.COMPLEMENTISER)
        out.add(token)

    def _relative_pronoun(self, clause: ClauseSpec, relative, out: ListElement, ctx: SyntaxContext) -> None:
        function = relativised_function(clause)
        antecedent = antecedent_of(clause)
        if antecedent is not None:
            clause.set_feature("number", antecedent.get_feature("number", NumberAgreement.SINGULAR))

        if function is DiscourseFunction.SUBJECT:
            out.add(ctx.inflect("qui", LexicalCategory.PRONOUN, parent=clause))
            return
        if function is DiscourseFunction.OBJECT:
            out.add(ctx.inflect("que", LexicalCategory.PRONOUN, parent=clause))
            return

        if isinstance(relative, PrepositionPhraseSpec) and relative.preposition is not None:
            out.add(ctx.realise(relative.preposition))
        source = antecedent if antecedent is not None else relative
        gender = source.get_feature("gender", Gender.MASCULINE) if isinstance(source, NLGElement) else Gender.MASCULINE
        number = (source.get_feature("number", NumberAgreement.SINGULAR)
                  if isinstance(source, NLGElement) else NumberAgreement.SINGULAR)
        for g, n in relative_pronoun_candidates(gender, number):
            word = ctx.lexicon.lookup_by_features(
                LexicalCategory.PRONOUN,
                {
                    "pronoun_type": PronounType.RELATIVE,
                    "discourse_function": DiscourseFunction.COMPLEMENT,
                    "gender": g,
                    "number": n,
                },
            )
            if word is not None:
                token = ctx.inflect(word, parent=clause)
                token.set_feature("non_morph", True)
                out.add(token)
                return


__all__ = ["FrenchClauseHelper", "QUESTION_FORMS", "relative_pronoun_candidates"]
