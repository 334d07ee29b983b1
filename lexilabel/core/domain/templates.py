# lexilabel/core/domain/templates.py
"""
Label templates.

A template string is compiled once, when its label set is assembled, into a
tuple of segments:

- `TextSegment`: literal text.
- `ArgSegment`: positional argument, written `{0}`.
- `NounRefSegment`: a noun, written as a self-closing tag:
    `<Account/>`                   dictionary noun, capitalised
    `<account plural="y"/>`        lowercase, plural
    `<Accounts/>`                  the noun's plural alias
    `<Entity entity="0" article="a" case="a"/>`
                                   the renameable passed at index 0
- `ModifierRefSegment`: an adjective tag (`<New/>`); it agrees with the next
  noun reference, or the previous one when no noun follows.
- `ArticleSegment`: inserted by the compiler before a noun phrase whose noun
  requests an article the language writes as a separate word.
- `PluralChoiceSegment`: picks a branch by the plural category of an
  argument:
    `<plural num="0"><when val="one">{0} <account/></when>{0} <accounts/></plural>`
  Text outside `<when>` is the default (other) branch. A `zero` branch wins
  for the value 0 in every language.
- `GenderChoiceSegment`: picks a branch by the gender of the next noun
  reference, or the previous one when no noun follows:
    `<gender><when val="f">Neue</when><when val="m">Neuer</when>Neues</gender>`

`{{` and `}}` produce literal braces. Branch bodies are templates in their
own right. Rendering walks the segments and never re-parses the string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence, Tuple, Union

from lexilabel.core.domain.dictionary import LanguageDictionary
from lexilabel.core.domain.exceptions import (
    LabelRenderError,
    NoFormAvailableError,
    TemplateSyntaxError,
    UnsupportedGrammaticalFormError,
)
from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    NounForm,
    NounType,
    PluralCategory,
)
from lexilabel.core.domain.terms import Noun
from lexilabel.core.ports.renaming import IRenameable, IRenamingProvider

# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class ArgSegment:
    index: int


@dataclass(frozen=True)
class NounRefSegment:
    """
    Attributes:
        slot: ordinal of this noun reference within the template; modifiers
            and articles point at it.
        name: dictionary noun, or the default entity for `entity_index`.
        entity_index: index into the renameables of a render call.
        has_leading_modifier: an adjective bound to this noun precedes it.
    """

    slot: int
    tag: str
    name: Optional[str] = None
    entity_index: Optional[int] = None
    number: LanguageNumber = LanguageNumber.SINGULAR
    case: LanguageCase = LanguageCase.NOMINATIVE
    article: LanguageArticle = LanguageArticle.ZERO
    capitalize: bool = True
    has_leading_modifier: bool = False


@dataclass(frozen=True)
class ModifierRefSegment:
    tag: str
    name: str
    noun_slot: Optional[int] = None
    capitalize: bool = True
    after_article: bool = False


@dataclass(frozen=True)
class ArticleSegment:
    noun_slot: int
    article: LanguageArticle
    capitalize: bool = True



@dataclass(frozen=True)
class PluralChoiceSegment:
    """
    Attributes:
        index: argument whose value selects the branch.
        branches: one entry per category named in a `<when val="...">`.
        default: bare text of the choice, else the `other` branch.
    """

    index: int
    branches: Tuple[Tuple[PluralCategory, "LabelTemplate"], ...] = ()
    default: Optional["LabelTemplate"] = None


@dataclass(frozen=True)
class GenderChoiceSegment:
    branches: Tuple[Tuple[LanguageGender, "LabelTemplate"], ...] = ()
    default: Optional["LabelTemplate"] = None
    noun_slot: Optional[int] = None


Segment = Union[
    TextSegment,
    ArgSegment,
    NounRefSegment,
    ModifierRefSegment,
    ArticleSegment,
    PluralChoiceSegment,
    GenderChoiceSegment,
]


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------

_TOKEN_RE = re.compile(
    r"""
    (?P<lbrace>\{\{)
    | (?P<rbrace>\}\})
    | \{(?P<arg>\d+)\}
    | <(?P<choice>plural|gender)(?P<choice_attrs>(?:\s+[A-Za-z_]+\s*=\s*"[^"]*")*)\s*>
    | <(?P<tag>[^\W\d][\w-]*)(?P<attrs>(?:\s+[A-Za-z_]+\s*=\s*"[^"]*")*)\s*/>
    """,
    re.VERBOSE,
)
_ATTR_RE = re.compile(r'([A-Za-z_]+)\s*=\s*"([^"]*)"')
_KNOWN_ATTRS = frozenset({"entity", "plural", "case", "article"})
_ENTITY_TAG = "entity"

# Opening or closing tags of the choice markup, for nesting and stray checks.
_CHOICE_TAG_RE = re.compile(
    r"<(?P<close>/?)(?P<name>plural|gender|when)\b(?P<attrs>[^>]*?)(?P<empty>/?)>"
)


def compile_template(source: str, dictionary: LanguageDictionary) -> "LabelTemplate":
    """
    Compile a template string against the dictionary it will render with.

    Raises:
        TemplateSyntaxError: stray braces, unknown tag attributes, unknown
            category codes or unbalanced choice markup.
    """
    segments: List[Segment] = []
    slot = 0
    pos = 0
    while True:
        match = _TOKEN_RE.search(source, pos)
        if match is None:
            break
        _append_text(segments, source[pos:match.start()], source)
        pos = match.end()
        if match.group("lbrace"):
            _append_text(segments, "{", source, literal=True)
        elif match.group("rbrace"):
            _append_text(segments, "}", source, literal=True)
        elif match.group("arg") is not None:
            segments.append(ArgSegment(int(match.group("arg"))))
        elif match.group("choice"):
            body, pos = _choice_body(source, match.group("choice"), match.end())
            segments.append(
                _compile_choice(match.group("choice"), match.group("choice_attrs"), body, dictionary, source)
            )
        else:
            segment = _compile_tag(match.group("tag"), match.group("attrs"), slot, dictionary, source)
            if isinstance(segment, TextSegment):
                _append_text(segments, match.group(0), source, literal=True)
                continue
            if isinstance(segment, NounRefSegment):
                slot += 1
            segments.append(segment)
    _append_text(segments, source[pos:], source)

    segments = _bind_modifiers(segments)
    segments = _insert_articles(segments, dictionary)
    return LabelTemplate(source, tuple(segments))


def _append_text(segments: List[Segment], text: str, source: str, literal: bool = False) -> None:
    if not text:
        return
    if not literal:
        if "{" in text or "}" in text:
            raise TemplateSyntaxError(source, "unbalanced or non-numeric brace")
        for stray in _CHOICE_TAG_RE.finditer(text):
            if not stray.group("empty"):
                raise TemplateSyntaxError(source, f"unexpected {stray.group(0)}")
    if segments and isinstance(segments[-1], TextSegment):
        segments[-1] = TextSegment(segments[-1].text + text)
    else:
        segments.append(TextSegment(text))


def _choice_body(source: str, name: str, start: int) -> Tuple[str, int]:
    """Body of the `<name>` opened just before `start`, and the index after its close tag."""
    depth = 1
    for match in _CHOICE_TAG_RE.finditer(source, start):
        if match.group("name") != name or match.group("empty"):
            continue
        depth += -1 if match.group("close") else 1
        if depth == 0:
            return source[start:match.start()], match.end()
    raise TemplateSyntaxError(source, f"unclosed <{name}>")


def _compile_choice(
    kind: str,
    raw_attrs: str,
    body: str,
    dictionary: LanguageDictionary,
    source: str,
) -> Segment:
    attrs: Dict[str, str] = {k.lower(): v for k, v in _ATTR_RE.findall(raw_attrs or "")}
    allowed = {"num"} if kind == "plural" else set()
    unknown = set(attrs) - allowed
    if unknown:
        raise TemplateSyntaxError(source, f"unknown attribute(s) {sorted(unknown)} on <{kind}>")
    category = PluralCategory if kind == "plural" else LanguageGender

    branches: List[Tuple[object, LabelTemplate]] = []
    bare: List[str] = []
    pos = 0
    while True:
        match = _CHOICE_TAG_RE.search(body, pos)
        if match is None:
            break
        if match.group("empty"):
            bare.append(body[pos:match.end()])
            pos = match.end()
            continue
        if match.group("close"):
            # Closers of nested choices are consumed with their openers.
            raise TemplateSyntaxError(source, f"unexpected {match.group(0)} in <{kind}>")
        bare.append(body[pos:match.start()])
        name = match.group("name")
        inner, pos = _choice_body(body, name, match.end())
        if name != "when":
            bare.append(body[match.start():pos])
            continue
        when_attrs = {k.lower(): v for k, v in _ATTR_RE.findall(match.group("attrs"))}
        if set(when_attrs) != {"val"}:
            raise TemplateSyntaxError(source, f'<when> in <{kind}> needs exactly a val="..." attribute')
        template = compile_template(inner, dictionary)
        for code in when_attrs["val"].split(","):
            try:
                branches.append((category.from_label_value(code), template))
            except ValueError as exc:
                raise TemplateSyntaxError(source, f"bad <when> value in <{kind}>: {exc}") from exc
    bare.append(body[pos:])

    default_text = "".join(piece for piece in bare if piece.strip())
    default = compile_template(default_text, dictionary) if default_text else None

    if kind == "gender":
        return GenderChoiceSegment(branches=tuple(branches), default=default)

    try:
        index = int(attrs["num"])
    except (KeyError, ValueError) as exc:
        raise TemplateSyntaxError(source, '<plural> needs a numeric num="..." attribute') from exc
    if default is None:
        default = dict(branches).get(PluralCategory.OTHER)
    return PluralChoiceSegment(index=index, branches=tuple(branches), default=default)


def _compile_tag(
    tag: str,
    raw_attrs: str,
    slot: int,
    dictionary: LanguageDictionary,
    source: str,
) -> Segment:
    attrs: Dict[str, str] = {k.lower(): v for k, v in _ATTR_RE.findall(raw_attrs or "")}
    unknown = set(attrs) - _KNOWN_ATTRS
    if unknown:
        raise TemplateSyntaxError(source, f"unknown attribute(s) {sorted(unknown)} on <{tag}/>")

    try:
        number = LanguageNumber.from_label_value(attrs["plural"]) if "plural" in attrs else None
        case = LanguageCase.from_label_value(attrs.get("case", "n"))
        article = LanguageArticle.from_label_value(attrs.get("article", ""))
        entity_index = int(attrs["entity"]) if "entity" in attrs else None
    except ValueError as exc:
        raise TemplateSyntaxError(source, f"bad attribute on <{tag}/>: {exc}") from exc

    capitalize = tag[:1].isupper()
    name: Optional[str] = tag

    if entity_index is not None or tag.lower() == _ENTITY_TAG:
        if tag.lower() == _ENTITY_TAG:
            name = None
        if entity_index is None:
            entity_index = 0
    elif dictionary.get_noun(tag) is None:
        aliased = dictionary.get_noun_by_plural_alias(tag)
        if aliased is not None:
            name = aliased.name
            if number is None:
                number = LanguageNumber.PLURAL
        elif dictionary.get_adjective(tag) is not None:
            return ModifierRefSegment(tag=tag, name=tag, capitalize=capitalize)
        elif not attrs:
            # Unknown bare tags (<br/>) are markup, not terms.
            return TextSegment(f"<{tag}/>")

    return NounRefSegment(
        slot=slot,
        tag=tag,
        name=name,
        entity_index=entity_index,
        number=number if number is not None else LanguageNumber.SINGULAR,
        case=case,
        article=article,
        capitalize=capitalize,
    )




def _bind_modifiers(segments: List[Segment]) -> List[Segment]:
    noun_positions = [i for i, s in enumerate(segments) if isinstance(s, NounRefSegment)]
    if not noun_positions:
        return segments
    leading = set()
    bound: List[Segment] = []
    for i, seg in enumerate(segments):
        if isinstance(seg, (ModifierRefSegment, GenderChoiceSegment)):
            following = [p for p in noun_positions if p > i]
            target = following[0] if following else noun_positions[-1]
            target_slot = segments[target].slot
            if following and isinstance(seg, ModifierRefSegment):
                leading.add(target_slot)
            seg = replace(seg, noun_slot=target_slot)
        bound.append(seg)
    return [
        replace(s, has_leading_modifier=True)
        if isinstance(s, NounRefSegment) and s.slot in leading
        else s
        for s in bound
    ]


def _insert_articles(segments: List[Segment], dictionary: LanguageDictionary) -> List[Segment]:
    declension = dictionary.declension
    inserts: List[Tuple[int, ArticleSegment]] = []
    for pos, seg in enumerate(segments):
        if not isinstance(seg, NounRefSegment) or seg.article is LanguageArticle.ZERO:
            continue
        if declension.inflects_article(seg.article):
            continue
        # Place the article before the adjectives that lead into this noun.
        insert_at = pos
        j = pos - 1
        while j >= 0:
            prev = segments[j]
            if isinstance(prev, ModifierRefSegment) and prev.noun_slot == seg.slot:
                insert_at = j
            elif not (isinstance(prev, TextSegment) and not prev.text.strip()):
                break
            j -= 1
        inserts.append((insert_at, ArticleSegment(seg.slot, seg.article, seg.capitalize)))

    result = list(segments)
    for insert_at, article in reversed(inserts):
        if isinstance(result[insert_at], ModifierRefSegment):
            result[insert_at] = replace(result[insert_at], after_article=True)
        result.insert(insert_at, article)
    return result


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@dataclass
class RenderContext:
    """
    Everything one render call needs besides the template.

    With `strict`, unresolved references raise `LabelRenderError`; otherwise
    they render as visible placeholders. `allow_other_forms` lets a template
    request forms the language lacks; they degrade to the closest legal form.
    """

    dictionary: LanguageDictionary
    label: str
    renameables: Sequence[IRenameable] = ()
    args: Sequence[object] = ()
    renaming: Optional[IRenamingProvider] = None
    strict: bool = True
    allow_other_forms: bool = False


@dataclass
class _ResolvedNoun:
    noun: Noun
    form: NounForm
    article: LanguageArticle


@dataclass(frozen=True)
class LabelTemplate:
    source: str
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def is_plain(self) -> bool:
        return all(isinstance(s, TextSegment) for s in self.segments)

    @property
    def entity_indexes(self) -> Tuple[int, ...]:
        return tuple(sorted(_entity_indexes(self.segments)))

    def render(self, ctx: RenderContext) -> str:
        if self.is_plain:
            return "".join(s.text for s in self.segments)

        resolved: Dict[int, Optional[_ResolvedNoun]] = {}
        for seg in self.segments:
            if isinstance(seg, NounRefSegment):
                resolved[seg.slot] = _resolve_noun(seg, ctx)

        parts: List[str] = []
        article_positions: List[int] = []
        for seg in self.segments:
            if isinstance(seg, TextSegment):
                parts.append(seg.text)
            elif isinstance(seg, ArgSegment):
                parts.append(_render_arg(seg, ctx))
            elif isinstance(seg, NounRefSegment):
                parts.append(_render_noun(seg, resolved[seg.slot], ctx))
            elif isinstance(seg, ModifierRefSegment):
                parts.append(_render_modifier(seg, resolved.get(seg.noun_slot), ctx))
            elif isinstance(seg, PluralChoiceSegment):
                parts.append(_render_plural_choice(seg, ctx))
            elif isinstance(seg, GenderChoiceSegment):
                parts.append(_render_gender_choice(seg, resolved.get(seg.noun_slot), ctx))
            else:
                article_positions.append(len(parts))
                parts.append("")

        # Articles last: their choice depends on the word rendered after them.
        for index in article_positions:
            seg = self.segments[index]
            parts[index] = _render_article(seg, resolved.get(seg.noun_slot), self.segments, index, ctx)
            if not parts[index] and seg.capitalize and index + 1 < len(parts):
                # No article in this form: the next word leads the phrase.
                parts[index + 1] = ctx.dictionary.declension.capitalize(parts[index + 1])
        return "".join(parts)


def _entity_indexes(segments: Sequence[Segment]) -> set:
    found = set()
    for seg in segments:
        if isinstance(seg, NounRefSegment) and seg.entity_index is not None:
            found.add(seg.entity_index)
        elif isinstance(seg, (PluralChoiceSegment, GenderChoiceSegment)):
            for _, branch in seg.branches:
                found |= _entity_indexes(branch.segments)
            if seg.default is not None:
                found |= _entity_indexes(seg.default.segments)
    return found


def _placeholder(ctx: RenderContext, reference: str) -> str:
    return f"[[{ctx.label}:{reference}]]"


def _fail(ctx: RenderContext, reference: str, reason: str) -> str:
    if ctx.strict:
        raise LabelRenderError(ctx.label, reason)
    return _placeholder(ctx, reference)


def _render_arg(seg: ArgSegment, ctx: RenderContext) -> str:
    if seg.index < len(ctx.args):
        return str(ctx.args[seg.index])
    if ctx.strict:
        raise LabelRenderError(ctx.label, f"missing argument {{{seg.index}}}")
    return "{%d}" % seg.index


def _as_count(value: object) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        count = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return count if count.is_finite() else None


def _render_plural_choice(seg: PluralChoiceSegment, ctx: RenderContext) -> str:
    count = _as_count(ctx.args[seg.index]) if seg.index < len(ctx.args) else None
    branch = seg.default
    if count is not None:
        branches = dict(seg.branches)
        if count == 0 and PluralCategory.ZERO in branches:
            branch = branches[PluralCategory.ZERO]
        else:
            branch = branches.get(ctx.dictionary.declension.plural_category(count), seg.default)
    return branch.render(ctx) if branch is not None else ""


def _render_gender_choice(
    seg: GenderChoiceSegment, res: Optional[_ResolvedNoun], ctx: RenderContext
) -> str:
    branch = seg.default
    if res is not None and res.noun.gender is not None:
        branch = dict(seg.branches).get(res.noun.gender, seg.default)
    return branch.render(ctx) if branch is not None else ""


def _resolve_noun(seg: NounRefSegment, ctx: RenderContext) -> Optional[_ResolvedNoun]:
    dictionary = ctx.dictionary
    provider = ctx.renaming

    if seg.entity_index is not None:
        if seg.entity_index < len(ctx.renameables):
            entity_name: Optional[str] = ctx.renameables[seg.entity_index].entity_name
        else:
            entity_name = seg.name
        if entity_name is None:
            return None
        if provider is not None:
            noun = provider.get_renameable(dictionary, entity_name)
        else:
            noun = dictionary.get_noun(entity_name)
    else:
        noun = dictionary.get_noun(seg.name or "")
        if noun is not None and noun.noun_type is NounType.ENTITY and provider is not None:
            renamed = provider.get_renameable(dictionary, noun.name)
            if renamed is not None:
                noun = renamed
    if noun is None:
        return None

    declension = noun.declension
    inline = declension.inflects_article(seg.article)
    noun_article = seg.article if inline else LanguageArticle.ZERO
    try:
        form = declension.get_noun_form(seg.number, seg.case, noun_article)
    except UnsupportedGrammaticalFormError:
        if not ctx.allow_other_forms:
            raise
        form = declension.get_closest_noun_form(seg.number, seg.case, noun_article)

    article = seg.article
    if not inline and article is not LanguageArticle.ZERO:
        # Forms without a separate article (e.g. English plural "a") agree as article-less.
        separate = declension.get_article_string(
            article, noun.starts_with, noun.gender, form.number, form.case
        )
        if separate is None and dictionary.get_article_by_type(article) is None:
            article = LanguageArticle.ZERO
    return _ResolvedNoun(noun, form, article)


def _render_noun(seg: NounRefSegment, res: Optional[_ResolvedNoun], ctx: RenderContext) -> str:
    reference = seg.tag if seg.entity_index is None else f"{seg.tag}:{seg.entity_index}"
    if res is None:
        return _fail(ctx, reference, f"no noun for <{reference}/>")
    try:
        text = res.noun.get_string(res.form)
    except NoFormAvailableError as exc:
        return _fail(ctx, reference, exc.message)

    declension = res.noun.declension
    if not seg.capitalize:
        return declension.format_lowercase_noun(text, res.form)
    if seg.article is LanguageArticle.ZERO or declension.inflects_article(seg.article):
        if not seg.has_leading_modifier:
            return declension.capitalize(text)
    return text


def _render_modifier(
    seg: ModifierRefSegment, res: Optional[_ResolvedNoun], ctx: RenderContext
) -> str:
    adjective = ctx.dictionary.get_adjective(seg.name)
    if adjective is None:
        return _fail(ctx, seg.tag, f"no adjective for <{seg.tag}/>")

    declension = ctx.dictionary.declension
    if res is not None:
        form = declension.get_adjective_form(
            number=res.form.number,
            case=res.form.case,
            gender=res.noun.gender,
            starts_with=res.noun.starts_with,
            article=res.article,
        )
    else:
        form = declension.get_adjective_form()
    try:
        text = adjective.get_string(form)
    except NoFormAvailableError as exc:
        return _fail(ctx, seg.tag, exc.message)
    if not seg.capitalize:
        return text.lower()
    if seg.after_article and res is not None and res.article is not LanguageArticle.ZERO:
        return text
    return declension.capitalize(text)


def _render_article(
    seg: ArticleSegment,
    res: Optional[_ResolvedNoun],
    segments: Sequence[Segment],
    index: int,
    ctx: RenderContext,
) -> str:
    if res is None or res.article is LanguageArticle.ZERO:
        return ""
    dictionary = ctx.dictionary
    declension = dictionary.declension

    starts_with = res.noun.starts_with
    following = segments[index + 1] if index + 1 < len(segments) else None
    if isinstance(following, ModifierRefSegment) and following.noun_slot == seg.noun_slot:
        adjective = dictionary.get_adjective(following.name)
        if adjective is not None:
            starts_with = adjective.starts_with

    form = declension.get_article_form(starts_with, res.noun.gender, res.form.number, res.form.case)
    term = dictionary.get_article_by_type(res.article)
    if term is not None:
        text = term.get_string(form)
    else:
        text = declension.get_default_article_string(form, res.article)
    if not text:
        return ""
    text = declension.capitalize(text) if seg.capitalize else declension.format_lowercase_article(text)
    return text + declension.article_joiner(text)
