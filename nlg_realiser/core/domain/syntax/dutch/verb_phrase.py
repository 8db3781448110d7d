# nlg_realiser\core\domain\syntax\dutch\verb_phrase.py
"""
Dutch verb phrases.

Main clauses are verb-second: the finite verb opens the verb phrase, the
non-finite verbs close it, and objects sit in between when there is an
auxiliary ("zal Jan hebben gemotiveerd"). Subordinate clauses, relative
clauses and te-infinitives put the whole verb cluster last.

The verb group tags only a finite auxiliary as AUX. Non-finite
auxiliaries stay in the MAIN cluster, so `group.auxiliaries` is exactly
the token that takes the second position.
"""

from __future__ import annotations

from typing import List, Optional

from ...elements import ClauseSpec, ListElement, NLGElement, PrepositionPhraseSpec, VerbPhraseSpec, WordElement
from ...features import (
    ClauseStatus,
    DiscourseFunction,
    ExtraFeature,
    Form,
    InterrogativeType,
    LexicalCategory,
    LexicalFeature,
    Tense,
)
from ...morphology.dutch import separable_compound
from ..base import SyntaxContext
from ..common import (
    clitic_token,
    has_reflexive_object,
    is_personal_pronoun,
    make_finite,
    make_non_finite,
    mark_finite,
    order_complement_groups,
    realise_subjects,
    relativised_function,
    select_clitics,
    subjects_of,
)
from ..verb_group import VerbGroup, VerbSlot

# Question types whose subject is placed by the verb-phrase pass.
SUBJECT_IN_VERB_PHRASE = (
    InterrogativeType.WHY,
    InterrogativeType.WHO_INDIRECT_OBJECT,
    InterrogativeType.WHERE,
)

SPECIAL_CLITICS = ("er",)


def is_verb_final(vp: VerbPhraseSpec) -> bool:
    """Subordinate, relative and infinitival verb phrases end in the verb cluster."""
    if vp.get_feature("clause_status") is ClauseStatus.SUBORDINATE:
        return True
    if vp.features.get_extra(ExtraFeature.TE_INFINITIVE):
        return True
    if vp.get_feature("form") in (Form.INFINITIVE, Form.BARE_INFINITIVE):
        return True
    parent = vp.parent
    return isinstance(parent, ClauseSpec) and parent.get_feature("relative_phrase") is not None


class DutchVerbPhraseHelper:
    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    def build_verb_group(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> VerbGroup:
        group = VerbGroup()
        verb = vp.head
        if not isinstance(verb, WordElement):
            return group

        te_infinitive = bool(vp.features.get_extra(ExtraFeature.TE_INFINITIVE))
        form = Form.INFINITIVE if te_infinitive else vp.get_feature("form", Form.NORMAL)
        tense = vp.get_feature("tense", Tense.PRESENT)
        modal = vp.get_feature("modal")
        perfect = vp.flag("perfect")
        passive = vp.flag("passive")
        verb_final = is_verb_final(vp)

        main = ctx.inflect(verb, parent=vp)
        chain: List[NLGElement] = [main]

        def prepend(base: str, next_form: Form, category: LexicalCategory = LexicalCategory.VERB) -> NLGElement:
            make_non_finite(chain[0], next_form)
            token = ctx.inflect(base, category, parent=vp)
            chain.insert(0, token)
            return token

        if passive:
            # the perfect passive uses zijn + participle
            prepend("zijn" if perfect else "worden", Form.PAST_PARTICIPLE)
            perfect = False
        elif vp.flag("progressive"):
            make_non_finite(main, Form.INFINITIVE)
            for w in ("het", "aan"):
                particle = ctx.canned(w, parent=vp)
                particle.set_feature("non_morph", True)
                chain.insert(0, particle)
            chain.insert(0, ctx.inflect("zijn", LexicalCategory.VERB, parent=vp))

        if modal and tense is Tense.PAST and not perfect:
            # past modal: present perfect with the modal as infinitive
            prepend(modal, Form.INFINITIVE, LexicalCategory.MODAL)
            make_non_finite(chain[0], Form.INFINITIVE)
            chain.insert(0, ctx.inflect("hebben", LexicalCategory.VERB, parent=vp))
            tense = Tense.PRESENT
            modal = None

        if perfect:
            zijn = verb.flag(LexicalFeature.AUXILIARY_ZIJN) or has_reflexive_object(vp)
            prepend("zijn" if zijn else "hebben", Form.PAST_PARTICIPLE)

        if modal:
            prepend(modal, Form.INFINITIVE, LexicalCategory.MODAL)
        elif tense in (Tense.FUTURE, Tense.CONDITIONAL):
            prepend("zullen", Form.INFINITIVE)

        head = chain[0]
        finite: Optional[NLGElement] = None
        if form.is_finite:
            make_finite(head, vp)
            head.set_feature("tense", Tense.PAST if tense in (Tense.PAST, Tense.CONDITIONAL) else Tense.PRESENT)
            head.features.set_extra(ExtraFeature.FINITE, True)
            finite = head
        else:
            make_non_finite(head, form)
            if te_infinitive:
                te = ctx.inflect("te", LexicalCategory.PREPOSITION, parent=vp)
                te.set_feature("non_morph", True)
                chain.insert(chain.index(head), te)

        # separable compound verbs: split only when the main verb itself is finite
        scv = separable_compound(main)
        if scv.preverb:
            if finite is main and not verb_final:
                main.features.set_extra(ExtraFeature.PREVERB_REALISED, True)
                group.preverb = ctx.canned(scv.preverb, parent=vp)
                group.preverb.set_feature("non_morph", True)
            else:
                main.features.set_extra(ExtraFeature.PREVERB, scv.preverb)

        if vp.flag("negated"):
            negation = self._negation_token(vp, ctx)
            if finite is not None and finite is not main and not verb_final:
                chain.insert(1, negation)
            else:
                group.negation = negation

        for element in reversed(chain):
            slot = VerbSlot.AUX if element is finite and element is not main else VerbSlot.MAIN
            group.push(element, slot)
        return group

    @staticmethod
    def _negation_token(vp: VerbPhraseSpec, ctx: SyntaxContext) -> NLGElement:
        value = vp.features.get_extra(ExtraFeature.NEGATION_AUXILIARY)
        if isinstance(value, NLGElement):
            return ctx.realise(value)
        return ctx.inflect(str(value) if value else "niet", LexicalCategory.ADVERB, parent=vp)

    # ------------------------------------------------------------------
    # Verb phrase
    # ------------------------------------------------------------------

    def realise(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        group = self.build_verb_group(vp, ctx)
        if is_verb_final(vp):
            out = self._realise_verb_final(vp, group, ctx)
        else:
            out = self._realise_verb_second(vp, group, ctx)
        mark_finite(out, group.finite)
        return out if out.components else None

    def _realise_verb_second(self, vp: VerbPhraseSpec, group: VerbGroup, ctx: SyntaxContext) -> ListElement:
        out = ListElement(source=vp)
        it = vp.features.interrogative_type
        has_aux = bool(group.auxiliaries)
        head_segment = group.auxiliaries if has_aux else group.main
        out.extend(head_segment)

        if it in SUBJECT_IN_VERB_PHRASE and isinstance(vp.parent, ClauseSpec):
            subjects = realise_subjects(subjects_of(vp), ctx)
            if subjects.components:
                out.add(subjects)
                if group.finite is not None:
                    group.finite.features.set_extra(ExtraFeature.INVERTED, True)
            vp.parent.features.set_extra(ExtraFeature.SUBJECTS_REALISED, True)

        clitics = select_clitics(vp, SPECIAL_CLITICS, is_personal_pronoun)
        consumed = clitics.consumed
        for comp in reversed(clitics.push_order()):
            out.add(clitic_token(comp, ctx))

        for mod in vp.pre_modifiers:
            out.add(ctx.realise(mod))

        # with an auxiliary the non-finite cluster closes the middle field
        direct, indirect, other = self._complement_groups(vp, consumed, ctx)
        for name, items in order_complement_groups(direct, indirect, other):
            out.extend(items)
            if name == "direct":
                out.add(group.negation)
                out.add(group.preverb)
        if has_aux:
            out.extend(group.main)

        for mod in vp.post_modifiers:
            out.add(ctx.realise(mod))
        return out

    def _realise_verb_final(self, vp: VerbPhraseSpec, group: VerbGroup, ctx: SyntaxContext) -> ListElement:
        out = ListElement(source=vp)
        clitics = select_clitics(vp, SPECIAL_CLITICS, is_personal_pronoun)
        for comp in reversed(clitics.push_order()):
            out.add(clitic_token(comp, ctx))
        for mod in vp.pre_modifiers:
            out.add(ctx.realise(mod))

        direct, indirect, other = self._complement_groups(vp, clitics.consumed, ctx)
        for _, items in order_complement_groups(direct, indirect, other):
            out.extend(items)
        out.add(group.negation)
        out.extend(group.surface)
        for mod in vp.post_modifiers:
            out.add(ctx.realise(mod))
        return out

    def _complement_groups(self, vp: VerbPhraseSpec, consumed: List[NLGElement], ctx: SyntaxContext):
        it = vp.features.interrogative_type
        passive = vp.flag("passive")
        parent = vp.parent
        relativised = relativised_function(parent) if isinstance(parent, ClauseSpec) else None
        direct: List[NLGElement] = []
        indirect: List[NLGElement] = []
        other: List[NLGElement] = []

        for comp in vp.complements:
            if any(comp is c for c in consumed) or comp.flag("elided"):
                continue
            function = comp.discourse_function
            if relativised is not None and function is relativised:
                continue
            if function is DiscourseFunction.OBJECT:
                if passive or (it is not None and it.is_object):
                    continue
                direct.append(self._realise_complement(comp, ctx))
            elif function is DiscourseFunction.INDIRECT_OBJECT:
                if it is not None and it.is_indirect_object:
                    continue
                indirect.append(self._indirect_object(comp, ctx))
            elif not passive:
                other.append(self._realise_complement(comp, ctx))

        return ([r for r in direct if r is not None],
                [r for r in indirect if r is not None],
                [r for r in other if r is not None])

    @staticmethod
    def _realise_complement(comp: NLGElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        realised = ctx.realise(comp)
        if realised is not None and realised.discourse_function is None:
            realised.set_feature("discourse_function", comp.discourse_function)
        return realised

    def _indirect_object(self, comp: NLGElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        """A bare noun-phrase indirect object surfaces as "aan X"."""
        realised = self._realise_complement(comp, ctx)
        if realised is None or isinstance(comp, PrepositionPhraseSpec):
            return realised
        wrapped = ListElement()
        wrapped.set_feature("discourse_function", DiscourseFunction.INDIRECT_OBJECT)
        aan = ctx.inflect("aan", LexicalCategory.PREPOSITION, parent=comp)
        wrapped.add(aan)
        wrapped.add(realised)
        return wrapped


__all__ = ["DutchVerbPhraseHelper", "is_verb_final", "SUBJECT_IN_VERB_PHRASE", "SPECIAL_CLITICS"]
