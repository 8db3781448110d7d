# nlg_realiser\core\domain\syntax\french\verb_phrase.py
"""
French verb phrases.

The verb group is assembled in surface order ("ne le lui ai pas donné")
and then pushed onto the two-list builder innermost first, which tags the
finite host with its clitics and negation as AUX and leaves the
participle or infinitive in MAIN.

Clitic pronouns go before the finite host, after a modal that does not
raise clitics ("veux le lui donner"), or after a non-negated imperative
("donne-le-lui").
"""

from __future__ import annotations

from typing import List, Optional

from ...elements import ClauseSpec, ListElement, NLGElement, PrepositionPhraseSpec, VerbPhraseSpec, WordElement
from ...features import (
    DiscourseFunction,
    ExtraFeature,
    Form,
    Gender,
    LexicalCategory,
    LexicalFeature,
    NumberAgreement,
    Tense,
)
from ..base import SyntaxContext
from ..common import (
    clitic_token,
    has_reflexive_object,
    make_finite,
    make_non_finite,
    mark_finite,
    order_complement_groups,
    pronoun_of,
    relativised_function,
    select_clitics,
)
from ..verb_group import VerbGroup

SPECIAL_CLITICS = ("en", "y")


def _agree(token: NLGElement, source: NLGElement) -> None:
    token.set_feature("gender", source.get_feature("gender", Gender.MASCULINE))
    token.set_feature("number", source.get_feature("number", NumberAgreement.SINGULAR))


class FrenchVerbPhraseHelper:
    def build_verb_group(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> VerbGroup:
        group = VerbGroup()
        verb = vp.head
        if not isinstance(verb, WordElement):
            return group

        form = vp.get_feature("form", Form.NORMAL)
        tense = vp.get_feature("tense", Tense.PRESENT)
        modal = vp.get_feature("modal")
        perfect = vp.flag("perfect")
        negated = vp.flag("negated")

        main = ctx.inflect(verb, parent=vp)
        chain: List[NLGElement] = [main]
        # tokens whose gender/number follow the subject
        subject_agreeing: List[NLGElement] = []

        def prepend(base: str, next_form: Form, category: LexicalCategory = LexicalCategory.VERB) -> NLGElement:
            make_non_finite(chain[0], next_form)
            token = ctx.inflect(base, category, parent=vp)
            chain.insert(0, token)
            return token

        if vp.flag("passive"):
            prepend("être", Form.PAST_PARTICIPLE)
            subject_agreeing.append(main)
        elif vp.flag("progressive") and tense is not Tense.PAST:
            make_non_finite(main, Form.INFINITIVE)
            particle = ctx.canned("en train de", parent=vp)
            particle.set_feature("non_morph", True)
            chain.insert(0, particle)
            chain.insert(0, ctx.inflect("être", LexicalCategory.VERB, parent=vp))

        if modal and tense is Tense.PAST and not perfect:
            tense = Tense.PRESENT
            perfect = True

        participle_host: Optional[NLGElement] = None
        modal_token: Optional[NLGElement] = None
        if modal:
            modal_token = prepend(modal, Form.INFINITIVE, LexicalCategory.MODAL)
        if perfect:
            head_word = chain[0]
            etre = (head_word is main and verb.flag(LexicalFeature.AUXILIARY_ETRE)) or has_reflexive_object(vp)
            participle_host = head_word
            prepend("être" if etre else "avoir", Form.PAST_PARTICIPLE)
            if etre:
                subject_agreeing.append(participle_host)

        for token in subject_agreeing:
            _agree(token, vp)

        head = chain[0]
        finite = None
        if form.is_finite:
            make_finite(head, vp)
            if tense is not vp.get_feature("tense", Tense.PRESENT):
                head.set_feature("tense", tense)
            head.features.set_extra(ExtraFeature.FINITE, True)
            finite = head
        else:
            make_non_finite(head, form)

        # clitics
        clitics = select_clitics(vp, SPECIAL_CLITICS)
        clitic_tokens: List[NLGElement] = []
        for comp in reversed(clitics.push_order()):
            token = clitic_token(comp, ctx)
            if comp is clitics.direct:
                group.direct_object_clitic = token
            clitic_tokens.append(token)
        group.consumed_complements = clitics.consumed

        # past participle agrees with a preceding direct-object clitic
        if participle_host is not None and participle_host not in subject_agreeing and clitics.direct is not None:
            _agree(participle_host, clitics.direct)

        enclitic = form is Form.IMPERATIVE and not negated
        if enclitic:
            for token in clitic_tokens:
                token.features.set_extra("enclitic", True)
            chain[1:1] = clitic_tokens
        elif modal_token is not None and not modal_token.flag(LexicalFeature.CLITIC_RISING):
            idx = chain.index(modal_token) + 1
            while idx < len(chain) and chain[idx].get_feature("form") is not Form.INFINITIVE:
                idx += 1
            chain[idx:idx] = clitic_tokens
        else:
            chain[0:0] = clitic_tokens

        if negated:
            ne = ctx.inflect("ne", LexicalCategory.ADVERB, parent=vp)
            pas = self._negation_token(vp, ctx)
            if finite is not None:
                chain.insert(0, ne)
                chain.insert(chain.index(finite) + 1, pas)
            else:
                chain[0:0] = [ne, pas]

        for element in reversed(chain):
            group.push(element)
        return group

    @staticmethod
    def _negation_token(vp: VerbPhraseSpec, ctx: SyntaxContext) -> NLGElement:
        value = vp.features.get_extra(ExtraFeature.NEGATION_AUXILIARY)
        if isinstance(value, NLGElement):
            return ctx.realise(value)
        return ctx.inflect(str(value) if value else "pas", LexicalCategory.ADVERB, parent=vp)

    def realise(self, vp: VerbPhraseSpec, ctx: SyntaxContext) -> Optional[ListElement]:
        out = ListElement(source=vp)
        group = self.build_verb_group(vp, ctx)
        out.extend(group.auxiliaries)
        out.extend(group.main)
        mark_finite(out, group.finite)

        consumed = group.consumed_complements

        it = vp.features.interrogative_type
        passive = vp.flag("passive")
        parent = vp.parent
        relativised = relativised_function(parent) if isinstance(parent, ClauseSpec) else None
        direct, indirect, other = [], [], []
        for comp in vp.complements:
            if any(comp is c for c in consumed) or comp.flag("elided"):
                continue
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

        realised_direct = self._realise_all(direct, ctx)
        realised_indirect = [r for r in (self._indirect_object(c, ctx) for c in indirect) if r is not None]
        realised_other = self._realise_all(other, ctx)
        for _, items in order_complement_groups(realised_direct, realised_indirect, realised_other):
            out.extend(items)

        for mod in vp.pre_modifiers + vp.post_modifiers:
            out.add(ctx.realise(mod))
        return out if out.components else None

    @staticmethod
    def _realise_all(comps: List[NLGElement], ctx: SyntaxContext) -> List[NLGElement]:
        out: List[NLGElement] = []
        for comp in comps:
            realised = ctx.realise(comp)
            if realised is None:
                continue
            if realised.discourse_function is None:
                realised.set_feature("discourse_function", comp.discourse_function)
            out.append(realised)
        return out

    @staticmethod
    def _indirect_object(comp: NLGElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        """A bare noun-phrase indirect object surfaces as "à X"."""
        realised = ctx.realise(comp)
        if realised is None or isinstance(comp, PrepositionPhraseSpec):
            return realised
        if pronoun_of(comp) is not None:
            # strong pronoun after the preposition
            for leaf in (realised.leaves() if isinstance(realised, ListElement) else [realised]):
                leaf.set_feature("discourse_function", DiscourseFunction.OBJECT)
        wrapped = ListElement()
        wrapped.set_feature("discourse_function", DiscourseFunction.INDIRECT_OBJECT)
        wrapped.add(ctx.inflect("à", LexicalCategory.PREPOSITION, parent=comp))
        wrapped.add(realised)
        return wrapped


__all__ = ["FrenchVerbPhraseHelper", "SPECIAL_CLITICS"]
