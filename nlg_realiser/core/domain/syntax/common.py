# nlg_realiser\core\domain\syntax\common.py
"""
core/domain/syntax/common.py

Free functions shared by the per-language clause and verb-phrase
helpers: feature propagation, agreement, subject splicing, object
relocation, complement ordering and clitic selection.

Every function operates on the working copy of the tree handed to the
helpers; none of them touch the caller's input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..elements import (
    ClauseSpec,
    CoordinatedPhraseElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    NounPhraseSpec,
    PhraseElement,
    StringElement,
    VerbPhraseSpec,
    WordElement,
)
from ..features import (
    ClauseStatus,
    DiscourseFunction,
    ExtraFeature,
    Form,
    Gender,
    InterrogativeType,
    LexicalCategory,
    NumberAgreement,
    Person,
    PhraseCategory,
    PronounType,
)
from .base import SyntaxContext


# Clause-level features the verb phrase needs to build its group.
CLAUSE_TO_VP: Tuple[str, ...] = (
    "tense",
    "perfect",
    "progressive",
    "passive",
    "negated",
    "modal",
    "form",
    "interrogative_type",
    "clause_status",
    "aggregate_auxiliary",
    ExtraFeature.TE_INFINITIVE.value,
    ExtraFeature.NEGATION_AUXILIARY.value,
)


# ---------------------------------------------------------------------------
# Clause preparation
# ---------------------------------------------------------------------------


def propagate_clause_features(clause: ClauseSpec, vp: VerbPhraseSpec) -> None:
    for key in CLAUSE_TO_VP:
        value = clause.get_feature(key)
        if value is not None:
            vp.set_feature(key, value)


def expand_coordinates(elements: Iterable[NLGElement]) -> List[NLGElement]:
    out: List[NLGElement] = []
    for element in elements:
        if isinstance(element, CoordinatedPhraseElement):
            out.extend(expand_coordinates(element.coordinates))
        else:
            out.append(element)
    return out


def antecedent_of(clause: ClauseSpec) -> Optional[NLGElement]:
    """The noun phrase a relative clause hangs off, if any."""
    for node in clause.ancestors():
        if node.is_a(PhraseCategory.NOUN_PHRASE):
            return node
        if node.is_a(PhraseCategory.CLAUSE):
            return None
    return None


def relativised_function(clause: ClauseSpec) -> Optional[DiscourseFunction]:
    value = clause.get_feature("relative_phrase")
    if value is None:
        return None
    if isinstance(value, DiscourseFunction):
        return value
    if isinstance(value, NLGElement):
        return value.discourse_function
    return DiscourseFunction(str(value).lower())


def surface_subjects(clause: ClauseSpec) -> List[NLGElement]:
    """Subjects as they surface: the objects under passive."""
    if clause.flag("passive"):
        return list(clause.verb_phrase.complements_with(DiscourseFunction.OBJECT))
    return list(clause.subjects)


def compute_agreement(
    clause: ClauseSpec,
    vp: VerbPhraseSpec,
    *,
    with_gender: bool,
) -> None:
    """
    Person: FIRST if any subject is first person, else SECOND if any is
    second, else THIRD. Gender (when the language agrees in gender):
    FEMININE only if every subject is feminine. Number: PLURAL for several
    subjects, a conjunctive coordination or a plural subject.
    """
    subjects = surface_subjects(clause)
    relativised = relativised_function(clause)
    antecedent = antecedent_of(clause)
    if antecedent is not None and (
        relativised is DiscourseFunction.SUBJECT
        or (relativised is DiscourseFunction.OBJECT and clause.flag("passive"))
    ):
        subjects = [antecedent]

    it = clause.features.interrogative_type
    if it is not None and it.is_subject:
        vp.set_feature("person", Person.THIRD)
        vp.set_feature("number", NumberAgreement.SINGULAR)
        return

    if not subjects:
        return

    expanded = expand_coordinates(subjects)
    persons = [s.get_feature("person") for s in expanded]
    if Person.FIRST in persons:
        person = Person.FIRST
    elif Person.SECOND in persons:
        person = Person.SECOND
    else:
        person = Person.THIRD

    plural = len(subjects) > 1
    for s in subjects:
        if isinstance(s, CoordinatedPhraseElement):
            plural = plural or s.resolved_number() is NumberAgreement.PLURAL
        elif s.get_feature("number") is NumberAgreement.PLURAL:
            plural = True

    vp.set_feature("person", person)
    vp.set_feature("number", NumberAgreement.PLURAL if plural else NumberAgreement.SINGULAR)

    if with_gender:
        feminine = all(s.get_feature("gender") is Gender.FEMININE for s in expanded)
        vp.set_feature("gender", Gender.FEMININE if feminine else Gender.MASCULINE)


def check_clausal_subjects(clause: ClauseSpec, ctx: SyntaxContext, determiner: str, noun: str) -> None:
    """
    A clause used as a subject is wrapped in "<determiner> <noun>" with the
    clause attached as a post-modifier and demoted to a subordinate clause.
    """
    wrapped: List[NLGElement] = []
    for subject in clause.subjects:
        if isinstance(subject, ClauseSpec):
            subject.set_feature("clause_status", ClauseStatus.SUBORDINATE)
            subject.set_feature("suppressed_complementiser", False)
            np = ctx.factory.create_noun_phrase(determiner, noun)
            np.add_post_modifier(subject)
            np.set_feature("discourse_function", DiscourseFunction.SUBJECT)
            np.parent = clause
            wrapped.append(np)
        else:
            wrapped.append(subject)
    clause.subjects = wrapped


def embedded_imperative_to_infinitive(clause: ClauseSpec) -> None:
    if clause.discourse_function in (DiscourseFunction.OBJECT, DiscourseFunction.INDIRECT_OBJECT) and (
        clause.get_feature("form") is Form.IMPERATIVE
    ):
        clause.set_feature("form", Form.INFINITIVE)
        clause.verb_phrase.set_feature("form", Form.INFINITIVE)


def copy_front_modifiers(clause: ClauseSpec, vp: VerbPhraseSpec) -> None:
    if clause.get_feature("form") is Form.INFINITIVE and clause.front_modifiers:
        for mod in clause.front_modifiers:
            vp.add_pre_modifier(mod)
        clause.front_modifiers = []


# ---------------------------------------------------------------------------
# Emission helpers
# ---------------------------------------------------------------------------


def realise_into(out: ListElement, elements: Sequence[NLGElement], ctx: SyntaxContext,
                 function: Optional[DiscourseFunction] = None) -> None:
    for element in elements:
        realised = ctx.realise(element)
        if realised is None:
            continue
        if function is not None and realised.discourse_function is None:
            realised.set_feature("discourse_function", function)
        out.add(realised)


def realise_subjects(subjects: Sequence[NLGElement], ctx: SyntaxContext) -> ListElement:
    out = ListElement()
    out.set_feature("discourse_function", DiscourseFunction.SUBJECT)
    for subject in subjects:
        subject.set_feature("discourse_function", DiscourseFunction.SUBJECT)
        out.add(ctx.realise(subject))
    return out


def emit_key_words(out: ListElement, ctx: SyntaxContext, *words: str) -> None:
    for w in words:
        if w:
            token = ctx.canned(w)
            token.set_feature("non_morph", True)
            out.add(token)


def mark_finite(vp_list: ListElement, token: Optional[NLGElement]) -> None:
    if token is None:
        return
    token.features.set_extra(ExtraFeature.FINITE, True)
    vp_list.features.set_extra(ExtraFeature.FINITE_VERB, token)


def finite_token(vp_list: Optional[NLGElement]) -> Optional[NLGElement]:
    if vp_list is None:
        return None
    return vp_list.features.get_extra(ExtraFeature.FINITE_VERB)


def insert_after_finite(vp_list: ListElement, element: Optional[NLGElement]) -> None:
    """
    Splice `element` right after the finite verb recorded by the
    verb-phrase helper; prepend when there is none.
    """
    if element is None or (isinstance(element, ListElement) and not element.components):
        return
    finite = finite_token(vp_list)
    idx = vp_list.index_of(finite) if finite is not None else -1
    if idx < 0:
        vp_list.insert(0, element)
        return
    vp_list.insert(idx + 1, element)
    finite.features.set_extra(ExtraFeature.INVERTED, True)


def relocate_object(out: ListElement, vp_list: ListElement, *, adjective_fallback: bool) -> None:
    """
    Move the realised object of the verb phrase so that it sits right
    before the verb phrase (HOW_ADJECTIVE, WHICH, HOW_MANY, WHOSE).
    """
    target = None
    for component in vp_list.components:
        if component.discourse_function is DiscourseFunction.OBJECT:
            target = component
            break
    if target is None and adjective_fallback:
        for component in vp_list.components:
            if component.is_a(PhraseCategory.ADJECTIVE_PHRASE, LexicalCategory.ADJECTIVE):
                target = component
                break
    if target is None:
        return
    vp_list.remove(target)
    idx = out.index_of(vp_list)
    out.insert(idx if idx >= 0 else len(out.components), target)


def word_count(element: Optional[NLGElement]) -> int:
    if element is None:
        return 0
    if isinstance(element, ListElement):
        return sum(word_count(c) for c in element.components)
    if isinstance(element, StringElement):
        return len((element.realisation or "").split())
    return 1


def order_complement_groups(
    direct: List[NLGElement], indirect: List[NLGElement], other: List[NLGElement]
) -> List[Tuple[str, List[NLGElement]]]:
    """
    Heavier constituents go later: groups are ordered by surface word
    count, ties broken direct < indirect < other.
    """
    groups = [("direct", direct), ("indirect", indirect), ("other", other)]
    ranked = [(sum(word_count(e) for e in g), rank, name, g) for rank, (name, g) in enumerate(groups)]
    ranked.sort(key=lambda t: (t[0], t[1]))
    return [(name, g) for _, _, name, g in ranked]


# ---------------------------------------------------------------------------
# Pronouns and clitics
# ---------------------------------------------------------------------------


def pronoun_of(element: NLGElement) -> Optional[WordElement]:
    """The pronoun a complement is or heads, if any."""
    if isinstance(element, WordElement) and element.is_a(LexicalCategory.PRONOUN):
        return element
    if isinstance(element, NounPhraseSpec) and isinstance(element.head, WordElement):
        if element.head.is_a(LexicalCategory.PRONOUN) and element.specifier is None:
            return element.head
    return None


def is_personal_pronoun(element: NLGElement) -> bool:
    pronoun = pronoun_of(element)
    if pronoun is None:
        return False
    return pronoun.get_feature("pronoun_type", PronounType.PERSONAL) in (
        PronounType.PERSONAL,
        PronounType.SPECIAL_PERSONAL,
        PronounType.REFLEXIVE,
    )


def _grammatical_number(element: NLGElement) -> NumberAgreement:
    if element.get_feature("number") is NumberAgreement.PLURAL:
        return NumberAgreement.PLURAL
    return NumberAgreement.SINGULAR


def has_reflexive_object(vp: VerbPhraseSpec) -> bool:
    """
    Whether a direct or indirect object refers back to the subject: either
    flagged reflexive ("se", "zich"), or a first or second person object
    matching the subject in person and number ("je me lave").

    Flagged reflexives take their person and number from the subject when
    inflected, so they match by construction. Under passive the direct
    object is the surface subject and does not count.
    """
    passive = vp.flag("passive")
    person = vp.get_feature("person", Person.THIRD)
    number = _grammatical_number(vp)
    for comp in vp.complements:
        if comp.flag("elided"):
            continue
        function = comp.discourse_function
        if function is not DiscourseFunction.INDIRECT_OBJECT and (
            passive or function is not DiscourseFunction.OBJECT
        ):
            continue
        pronoun = pronoun_of(comp)
        if comp.flag("reflexive") or (pronoun is not None and pronoun.flag("reflexive")):
            return True
        comp_person = comp.get_feature("person")
        if (
            comp_person in (Person.FIRST, Person.SECOND)
            and comp_person is person
            and _grammatical_number(comp) is number
        ):
            return True
    return False


@dataclass
class CliticSelection:
    special: List[NLGElement] = field(default_factory=list)
    direct: Optional[NLGElement] = None
    indirect: Optional[NLGElement] = None

    @property
    def consumed(self) -> List[NLGElement]:
        out = list(self.special)
        if self.direct is not None:
            out.append(self.direct)
        if self.indirect is not None:
            out.append(self.indirect)
        return out

    def push_order(self) -> List[NLGElement]:
        """
        Stack order [special...] [direct]; a third-person indirect object
        goes immediately before the direct object, otherwise after it.
        """
        order = list(self.special)
        direct, indirect = self.direct, self.indirect
        if direct is not None and indirect is not None:
            if indirect.get_feature("person", Person.THIRD) is Person.THIRD:
                order.extend([indirect, direct])
            else:
                order.extend([direct, indirect])
        elif direct is not None:
            order.append(direct)
        elif indirect is not None:
            order.append(indirect)
        return order

    def __bool__(self) -> bool:
        return bool(self.consumed)


def select_clitics(
    vp: VerbPhraseSpec,
    special_forms: Sequence[str],
    is_candidate: Callable[[NLGElement], bool] = lambda c: pronoun_of(c) is not None,
) -> CliticSelection:
    """
    Pick the complements that surface as clitic pronouns.

    A complement qualifies when it is (or heads) a pronoun or is marked
    pronominal. Elided complements and the relativised function are skipped.
    """
    selection = CliticSelection()
    passive = vp.flag("passive")
    parent = vp.parent
    relativised = relativised_function(parent) if isinstance(parent, ClauseSpec) else None
    it = vp.features.interrogative_type
    special_keys = [s.lower() for s in special_forms]
    specials: dict = {}

    for comp in vp.complements:
        if comp.flag("elided"):
            continue
        function = comp.discourse_function
        if relativised is not None and function is relativised:
            continue
        if it is not None and ((it.is_object and function is DiscourseFunction.OBJECT)
                               or (it.is_indirect_object and function is DiscourseFunction.INDIRECT_OBJECT)):
            continue
        if not (is_candidate(comp) or comp.flag("pronominal")):
            continue
        pronoun = pronoun_of(comp)
        base = pronoun.base_form.lower() if pronoun is not None else ""
        if base in special_keys:
            specials.setdefault(base, comp)
        elif function is DiscourseFunction.OBJECT and not passive:
            selection.direct = selection.direct or comp
        elif function is DiscourseFunction.INDIRECT_OBJECT:
            selection.indirect = selection.indirect or comp

    selection.special = [specials[k] for k in special_keys if k in specials]

    direct, indirect = selection.direct, selection.indirect
    if direct is not None and indirect is not None:
        third = direct.get_feature("person", Person.THIRD) is Person.THIRD
        if not third or direct.flag("reflexive"):
            selection.indirect = None
    return selection


def clitic_token(comp: NLGElement, ctx: SyntaxContext) -> InflectedWordElement:
    """A single inflected pronoun token standing for `comp`."""
    pronoun = pronoun_of(comp)
    if pronoun is None:
        # pronominalised noun phrase: any personal pronoun, morphology picks the form
        pronoun = ctx.lexicon.lookup_by_features(
            LexicalCategory.PRONOUN, {"pronoun_type": PronounType.PERSONAL}
        ) or WordElement(getattr(phrase_head(comp), "base_form", ""), LexicalCategory.PRONOUN)
        pronoun.set_feature("pronoun_type", PronounType.PERSONAL)
    token = ctx.inflect(pronoun, parent=comp)
    for key in ("person", "number", "gender", "reflexive"):
        value = comp.get_feature(key)
        if value is not None:
            token.set_feature(key, value)
    token.set_feature("discourse_function", comp.discourse_function)
    token.set_feature("clitic", True)
    return token


# ---------------------------------------------------------------------------
# Passive
# ---------------------------------------------------------------------------


def agent_phrase(clause: ClauseSpec, ctx: SyntaxContext, preposition: str) -> Optional[NLGElement]:
    """The logical subjects of a passive clause as "by/par/door ..." phrase."""
    if not clause.flag("passive") or not clause.subjects:
        return None
    if relativised_function(clause) is DiscourseFunction.SUBJECT:
        return None
    pp = ctx.factory.create_preposition_phrase(preposition)
    for subject in clause.subjects:
        subject.set_feature("discourse_function", DiscourseFunction.OBJECT)
        pp.add_complement(subject)
    pp.parent = clause
    return ctx.realise(pp)


# ---------------------------------------------------------------------------
# Verb tokens
# ---------------------------------------------------------------------------


def make_finite(token: NLGElement, vp: VerbPhraseSpec) -> None:
    """Copy tense and agreement from the verb phrase onto the finite token."""
    for key in ("tense", "person", "number", "gender"):
        value = vp.get_feature(key)
        if value is not None:
            token.set_feature(key, value)
    token.set_feature("form", vp.get_feature("form", Form.NORMAL))


def make_non_finite(token: NLGElement, form: Form) -> None:
    token.set_feature("form", form)
    token.set_feature("tense", None)


def subjects_of(vp: VerbPhraseSpec) -> List[NLGElement]:
    parent = vp.parent
    if isinstance(parent, ClauseSpec):
        return surface_subjects(parent)
    return []


def is_interrogative(it: Optional[InterrogativeType], *types: InterrogativeType) -> bool:
    return it is not None and it in types


def phrase_head(element: NLGElement) -> Optional[NLGElement]:
    if isinstance(element, PhraseElement):
        return element.head
    return element


__all__ = [
    "CLAUSE_TO_VP",
    "propagate_clause_features",
    "expand_coordinates",
    "antecedent_of",
    "relativised_function",
    "surface_subjects",
    "compute_agreement",
    "check_clausal_subjects",
    "embedded_imperative_to_infinitive",
    "copy_front_modifiers",
    "realise_into",
    "realise_subjects",
    "emit_key_words",
    "mark_finite",
    "finite_token",
    "insert_after_finite",
    "relocate_object",
    "word_count",
    "order_complement_groups",
    "pronoun_of",
    "is_personal_pronoun",
    "has_reflexive_object",
    "CliticSelection",
    "select_clitics",
    "clitic_token",
    "agent_phrase",
    "make_finite",
    "make_non_finite",
    "subjects_of",
    "is_interrogative",
    "phrase_head",
]
