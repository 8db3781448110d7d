# nlg_realiser\core\domain\syntax\dutch\clause.py
"""
Dutch clauses.

Questions and declaratives with a fronted modifier invert: the subject
follows the finite verb. Question words that stand in for the subject
("wie", "wat") leave the subject out and the verb in the third person
singular.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ...elements import ClauseSpec, ListElement, NLGElement, PrepositionPhraseSpec
from ...features import (
    ClauseStatus,
    DiscourseFunction,
    ExtraFeature,
    Form,
    Gender,
    InterrogativeType,
    LexicalCategory,
    NumberAgreement,
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
    insert_after_finite,
    propagate_clause_features,
    realise_into,
    realise_subjects,
    relativised_function,
    relocate_object,
    surface_subjects,
)

IT = InterrogativeType

KEY_WORDS: Dict[InterrogativeType, Tuple[str, ...]] = {
    IT.YES_NO: (),
    IT.HOW: ("hoe",),
    IT.HOW_ADJECTIVE: ("hoe",),
    IT.HOW_CONDITION_QUALITY: ("hoe",),
    IT.WHY: ("waarom",),
    IT.WHERE: ("waar",),
    IT.HOW_MANY: ("hoeveel",),
    IT.WHO_SUBJECT: ("wie",),
    IT.WHO_OBJECT: ("wie",),
    IT.WHO_INDIRECT_OBJECT: ("wie",),
    IT.WHAT_OBJECT: ("wat",),
    IT.WHAT_SUBJECT: ("wat",),
    IT.WHEN: ("wanneer",),
    IT.WHICH: ("welke",),
    IT.WHOSE: ("wiens",),
    IT.HOW_COME: ("hoezo",),
}

DEFAULT_PREPOSITION = "aan"


class DutchClauseHelper:
    agent_preposition = "door"

    def realise(self, clause: ClauseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        vp = clause.verb_phrase
        propagate_clause_features(clause, vp)
        check_clausal_subjects(clause, ctx, "het", "feit")
        compute_agreement(clause, vp, with_gender=True)
        embedded_imperative_to_infinitive(clause)
        copy_front_modifiers(clause, vp)

        out = ListElement(source=clause)
        it = clause.features.interrogative_type
        form = clause.get_feature("form", Form.NORMAL)
        fronted = bool(clause.front_modifiers)

        self._complementiser(clause, out, ctx)
        if clause.cue_phrase is not None and form is not Form.INFINITIVE:
            out.add(ctx.realise(clause.cue_phrase))

        if it is not None:
            if it is IT.WHO_INDIRECT_OBJECT:
                emit_key_words(out, ctx, self._io_preposition(clause))
            emit_key_words(out, ctx, *KEY_WORDS[it])
        else:
            realise_into(out, clause.front_modifiers, ctx, DiscourseFunction.FRONT_MODIFIER)

        vp_list = ctx.realise(vp)
        if not clause.features.get_extra(ExtraFeature.SUBJECTS_REALISED) and self._shows_subjects(clause, form, it):
            subjects = realise_subjects(surface_subjects(clause), ctx)
        else:
            subjects = None

        inverted = self._inverts(clause, it, fronted)
        if inverted and vp_list is not None:
            out.add(vp_list)
            insert_after_finite(vp_list, subjects)
        else:
            out.add(subjects)
            out.add(vp_list)

        if it is not None and it.relocates_object and vp_list is not None:
            relocate_object(out, vp_list, adjective_fallback=it is IT.HOW_ADJECTIVE)

        out.add(agent_phrase(clause, ctx, self.agent_preposition))
        realise_into(out, clause.post_modifiers, ctx, DiscourseFunction.POST_MODIFIER)
        return out if out.components else None

    # ------------------------------------------------------------------

    @staticmethod
    def _inverts(clause: ClauseSpec, it: Optional[InterrogativeType], fronted: bool) -> bool:
        if clause.get_feature("clause_status") is ClauseStatus.SUBORDINATE:
            return False
        if it is not None:
            return not it.is_subject
        return fronted

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

    def _complementiser(self, clause: ClauseSpec, out: ListElement, ctx: SyntaxContext) -> None:
        relative = clause.get_feature("relative_phrase")
        if relative is not None:
            source = relative if isinstance(relative, NLGElement) else antecedent_of(clause)
            number = NumberAgreement.SINGULAR
            gender = Gender.COMMON
            if source is not None:
                number = source.get_feature("number", NumberAgreement.SINGULAR)
                gender = source.get_feature("gender", Gender.COMMON)
                spec = getattr(source, "specifier", None)
                if spec is not None and getattr(spec, "base_form", None) == "het":
                    gender = Gender.NEUTER
            base = "dat" if gender is Gender.NEUTER and number is not NumberAgreement.PLURAL else "die"
            token = ctx.inflect(base, LexicalCategory.PRONOUN, parent=clause)
            token.set_feature("discourse_function", relativised_function(clause) or DiscourseFunction.COMPLEMENT)
            clause.set_feature("number", number)
            out.add(token)
            return
        subordinate = clause.get_feature("clause_status") is ClauseStatus.SUBORDINATE
        if not subordinate or clause.flag("suppressed_complementiser"):
            return
        value = clause.get_feature("complementiser") or "dat"
        if isinstance(value, NLGElement):
            out.add(ctx.realise(value))
            return
        token = ctx.inflect(str(value), LexicalCategory.COMPLEMENTISER, parent=clause)
        token.set_feature("discourse_function", DiscourseFunction.COMPLEMENTISER)
        out.add(token)


__all__ = ["DutchClauseHelper", "KEY_WORDS"]
