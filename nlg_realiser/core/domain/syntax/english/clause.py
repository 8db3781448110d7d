# nlg_realiser\core\domain\syntax\english\clause.py
"""
English clauses.

Declaratives are subject + verb phrase. Questions put their question word
first and, unless the question word is the subject (or the question is
"how come"), splice the subject in right after the finite verb, which
the verb-phrase helper has already provided via do-support if needed.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ...elements import ClauseSpec, ListElement, NLGElement, PrepositionPhraseSpec
from ...features import (
    ClauseStatus,
    DiscourseFunction,
    Form,
    InterrogativeType,
    LexicalCategory,
    LexicalFeature,
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
    phrase_head,
    propagate_clause_features,
    realise_into,
    realise_subjects,
    relativised_function,
    relocate_object,
    surface_subjects,
)
from .verb_phrase import needs_inversion

IT = InterrogativeType

KEY_WORDS: Dict[InterrogativeType, Tuple[str, ...]] = {
    IT.YES_NO: (),
    IT.WHO_SUBJECT: ("who",),
    IT.WHAT_SUBJECT: ("what",),
    IT.WHO_OBJECT: ("whom",),
    IT.WHO_INDIRECT_OBJECT: ("whom",),
    IT.WHAT_OBJECT: ("what",),
    IT.WHERE: ("where",),
    IT.WHY: ("why",),
    IT.WHEN: ("when",),
    IT.HOW: ("how",),
    IT.HOW_CONDITION_QUALITY: ("how",),
    IT.HOW_ADJECTIVE: ("how",),
    IT.HOW_MANY: ("how", "many"),
    IT.WHICH: ("which",),
    IT.WHOSE: ("whose",),
    IT.HOW_COME: ("how", "come"),
}


class EnglishClauseHelper:
    agent_preposition = "by"

    def realise(self, clause: ClauseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        vp = clause.verb_phrase
        propagate_clause_features(clause, vp)
        check_clausal_subjects(clause, ctx, "the", "fact")
        compute_agreement(clause, vp, with_gender=False)
        embedded_imperative_to_infinitive(clause)
        copy_front_modifiers(clause, vp)

        out = ListElement(source=clause)
        it = clause.features.interrogative_type
        form = clause.get_feature("form", Form.NORMAL)

        self._complementiser(clause, out, ctx)
        if clause.cue_phrase is not None:
            out.add(ctx.realise(clause.cue_phrase))

        if it is not None:
            emit_key_words(out, ctx, *KEY_WORDS[it])
        else:
            realise_into(out, clause.front_modifiers, ctx, DiscourseFunction.FRONT_MODIFIER)

        subjects = None
        if self._shows_subjects(clause, form, it):
            subjects = realise_subjects(surface_subjects(clause), ctx)

        vp_list = ctx.realise(vp)
        if needs_inversion(it) and vp_list is not None:
            out.add(vp_list)
            insert_after_finite(vp_list, subjects)
        else:
            out.add(subjects)
            out.add(vp_list)

        if it is not None and it.relocates_object and vp_list is not None:
            relocate_object(out, vp_list, adjective_fallback=it is IT.HOW_ADJECTIVE)

        if it is IT.WHO_INDIRECT_OBJECT:
            emit_key_words(out, ctx, self._stranded_preposition(clause))

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

    def _complementiser(self, clause: ClauseSpec, out: ListElement, ctx: SyntaxContext) -> None:
        if clause.get_feature("relative_phrase") is not None:
            antecedent = antecedent_of(clause)
            head = phrase_head(antecedent) if antecedent is not None else None
            human = head is not None and head.flag(LexicalFeature.HUMAN)
            out.add(ctx.inflect("who" if human else "which", LexicalCategory.PRONOUN, parent=clause))
            return
        if clause.get_feature("clause_status") is not ClauseStatus.SUBORDINATE:
            return
        if clause.flag("suppressed_complementiser"):
            return
        value = clause.get_feature("complementiser") or "that"
        if isinstance(value, NLGElement):
            out.add(ctx.realise(value))
        else:
            token = ctx.inflect(str(value), LexicalCategory.COMPLEMENTISER, parent=clause)
            token.set_feature("discourse_function", DiscourseFunction.COMPLEMENTISER)
            out.add(token)

    @staticmethod
    def _stranded_preposition(clause: ClauseSpec) -> str:
        io = clause.get_indirect_object()
        if isinstance(io, PrepositionPhraseSpec) and io.preposition is not None:
            return getattr(io.preposition, "base_form", "to")
        return "to"


__all__ = ["EnglishClauseHelper", "KEY_WORDS"]
