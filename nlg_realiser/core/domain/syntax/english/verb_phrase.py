# nlg_realiser\core\domain\syntax\english\verb_phrase.py
"""
English verb phrases.

The verb group is built as a chain in surface order (modal or will/would,
have, progressive be, passive be, main verb), each link fixing the form
of the next one. Do-support is added for negation and for questions that
invert, unless the main verb is "be" or an auxiliary already carries the
finite slot.
"""

from __future__ import annotations

from typing import List, Optional

from ...elements import ClauseSpec, ListElement, NLGElement, VerbPhraseSpec, WordElement
from ...features import (
    DiscourseFunction,
    Form,
    InterrogativeType,
    LexicalCategory,
    Tense,
)
from ..base import SyntaxContext
from ..common import make_finite, make_non_finite, mark_finite, relativised_function
from ..verb_group import VerbGroup, VerbSlot

# Question types that keep declarative order.
NON_INVERTING = (
    InterrogativeType.WHO_SUBJECT,
    InterrogativeType.WHAT_SUBJECT,
    InterrogativeType.HOW_COME,
)


def needs_inversion(it: Optional[InterrogativeType]) -> bool:
    return it is not None and it not in NON_INVERTING


class EnglishVerbPhraseHelper:
    def build_verb_group(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> VerbGroup:
        group = VerbGroup()
        verb = vp.head
        if not isinstance(verb, WordElement):
            return group

        form = vp.get_feature("form", Form.NORMAL)
        tense = vp.get_feature("tense", Tense.PRESENT)
        it = vp.features.interrogative_type
        modal = vp.get_feature("modal")

        main = ctx.inflect(verb, parent=vp)
        chain: List[NLGElement] = [main]

        def prepend(base: str, next_form: Form, category: LexicalCategory = LexicalCategory.VERB) -> None:
            make_non_finite(chain[0], next_form)
            chain.insert(0, ctx.inflect(base, category, parent=vp))

        if vp.flag("passive"):
            prepend("be", Form.PAST_PARTICIPLE)
        if vp.flag("progressive"):
            prepend("be", Form.PRESENT_PARTICIPLE)
        if vp.flag("perfect"):
            prepend("have", Form.PAST_PARTICIPLE)
        if modal:
            prepend(modal, Form.BARE_INFINITIVE, LexicalCategory.MODAL)
        elif tense is Tense.FUTURE:
            prepend("will", Form.BARE_INFINITIVE, LexicalCategory.MODAL)
        elif tense is Tense.CONDITIONAL:
            prepend("would", Form.BARE_INFINITIVE, LexicalCategory.MODAL)

        negated = vp.flag("negated")
        is_be = main.base_form.lower() == "be"
        if (
            len(chain) == 1
            and form is Form.NORMAL
            and not is_be
            and (negated or needs_inversion(it))
        ):
            prepend("do", Form.BARE_INFINITIVE)

        head = chain[0]
        if form in (Form.NORMAL, Form.IMPERATIVE, Form.SUBJUNCTIVE):
            make_finite(head, vp)
            if head.is_a(LexicalCategory.MODAL) and tense is not Tense.PAST:
                head.set_feature("tense", Tense.PRESENT)
            head.features.set_extra("finite", True)
            if negated:
                chain.insert(1, ctx.inflect("not", LexicalCategory.ADVERB, parent=vp))
        else:
            if form is Form.INFINITIVE:
                make_non_finite(head, Form.BARE_INFINITIVE)
                chain.insert(0, ctx.inflect("to", LexicalCategory.PREPOSITION, parent=vp))
            else:
                make_non_finite(head, form)
            if negated:
                chain.insert(0, ctx.inflect("not", LexicalCategory.ADVERB, parent=vp))

        for element in reversed(chain):
            group.push(element, VerbSlot.MAIN if element is main else VerbSlot.AUX)
        return group

    def realise(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        out = ListElement(source=vp)
        group = self.build_verb_group(vp, ctx)

        out.extend(group.auxiliaries)
        for mod in vp.pre_modifiers:
            out.add(ctx.realise(mod))
        out.extend(group.main)
        mark_finite(out, group.finite)

        it = vp.features.interrogative_type
        passive = vp.flag("passive")
        parent = vp.parent
        # the relativised constituent surfaces as the relative pronoun
        relativised = relativised_function(parent) if isinstance(parent, ClauseSpec) else None
        direct, indirect, other = [], [], []
        for comp in vp.complements:
            function = comp.discourse_function
            if relativised is not None and function is relativised:
                continue
            if function is DiscourseFunction.OBJECT:
                if passive or (it is not None and it.is_object):
                    continue
                direct.append(comp)
            elif function is DiscourseFunction.INDIRECT_OBJECT:
                if it is not None and it.is_indirect_object:
                    continue
                indirect.append(comp)
            elif not passive:
                other.append(comp)

        # English double-object order: give [Mary] [the book] [to ...]
        for comp in indirect + direct + other:
            realised = ctx.realise(comp)
            if realised is not None and realised.discourse_function is None:
                realised.set_feature("discourse_function", comp.discourse_function)
            out.add(realised)

        for mod in vp.post_modifiers:
            out.add(ctx.realise(mod))

        return out if out.components else None


__all__ = ["EnglishVerbPhraseHelper", "needs_inversion", "NON_INVERTING"]
