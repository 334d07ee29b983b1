# tests\core\test_declensions.py
import threading
from decimal import Decimal

import pytest

from lexilabel.core.domain.declension import (
    GenericDeclension,
    SimpleDeclension,
    get_declension,
    registered_languages,
)
from lexilabel.core.domain.declension.english import pluralize
from lexilabel.core.domain.exceptions import UnsupportedGrammaticalFormError
from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
    NounForm,
    NounType,
    PluralCategory,
)
from lexilabel.core.domain.terms import Adjective, Noun

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
ACC = LanguageCase.ACCUSATIVE
GEN = LanguageCase.GENITIVE
DAT = LanguageCase.DATIVE
DEFINITE = LanguageArticle.DEFINITE
INDEFINITE = LanguageArticle.INDEFINITE
VOWEL = LanguageStartsWith.VOWEL
CONSONANT = LanguageStartsWith.CONSONANT
SPECIAL = LanguageStartsWith.SPECIAL


class TestDeclensionFactory:
    def test_locales_share_the_language_declension(self):
        assert get_declension("de_AT") is get_declension("de")
        assert get_declension("en-GB") is get_declension("en_US")

    def test_unregistered_language_gets_generic_rules(self):
        declension = get_declension("pt_BR")
        assert isinstance(declension, GenericDeclension)
        assert declension.has_plural
        assert not declension.has_gender

    def test_east_asian_languages_have_no_agreement(self):
        declension = get_declension("ja")
        assert isinstance(declension, SimpleDeclension)
        assert not declension.has_plural

    def test_registered_languages(self):
        assert {"en", "de", "fr", "es", "it", "nl", "sv", "ru", "ja"} <= set(registered_languages())

    def test_concurrent_first_use_converges(self):
        """All threads must observe one shared instance."""
        results = []

        def worker():
            results.append(get_declension("it"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(d) for d in results}) == 1


class TestFormSpace:
    def test_unsupported_axes_raise(self, english):
        with pytest.raises(UnsupportedGrammaticalFormError):
            english.get_noun_form(SG, ACC)
        with pytest.raises(UnsupportedGrammaticalFormError):
            get_declension("ja").get_noun_form(PL)
        with pytest.raises(UnsupportedGrammaticalFormError):
            english.get_noun_form(SG, NOM, DEFINITE)

    def test_closest_form_degrades_instead(self, english):
        assert english.get_closest_noun_form(SG, ACC) == NounForm(SG)
        assert get_declension("ja").get_closest_noun_form(PL) == NounForm(SG)

    def test_form_space_sizes(self, english, german):
        assert len(english.get_default_forms()) == 2
        assert len(german.all_noun_forms) == 8
        assert len(get_declension("sv").all_noun_forms) == 4
        assert len(get_declension("ru").all_noun_forms) == 12
        assert german.has_cases and german.has_gender

    def test_required_forms_by_noun_type(self, german):
        assert len(german.required_forms(NounType.ENTITY)) == 8
        assert len(german.required_forms(NounType.FIELD)) == 4
        assert german.required_forms(NounType.OTHER) == (NounForm(SG),)

    def test_parse_noun_form_key(self, german):
        assert german.parse_noun_form_key("pl.d") == NounForm(PL, DAT)
        assert german.parse_noun_form_key("sg") == NounForm(SG)
        assert get_declension("sv").parse_noun_form_key("sg.n.the") == NounForm(SG, article=DEFINITE)
        with pytest.raises(UnsupportedGrammaticalFormError):
            get_declension("fr").parse_noun_form_key("sg.g")

    def test_gender_validation(self, english, german):
        assert english.check_gender(LanguageGender.FEMININE) is None
        assert german.check_gender(None) is LanguageGender.NEUTER
        with pytest.raises(UnsupportedGrammaticalFormError):
            german.check_gender(LanguageGender.COMMON)

    @pytest.mark.parametrize("code", ["en", "de", "nl", "sv", "fr", "es", "it", "ru", "ja", "pt"])
    def test_minimal_entity_answers_every_form(self, code):
        """A noun with only a singular must still resolve every legal form."""
        declension = get_declension(code)
        noun = Noun(declension, "account", {"sg": "Konto"}, noun_type=NounType.ENTITY)
        values = noun.all_values()
        assert set(values) == set(declension.all_noun_forms)
        assert all(values.values())

    @pytest.mark.parametrize("code", sorted(set(registered_languages()) | {"pt"}))
    def test_form_keys_round_trip(self, code):
        declension = get_declension(code)
        for form in set(declension.get_default_forms()) | set(declension.all_noun_forms):
            assert declension.get_noun_form(form.number, form.case, form.article) == form
            assert declension.coerce_noun_form(form) == form
            assert declension.parse_noun_form_key(form.key) == form


class TestEnglish:
    @pytest.mark.parametrize(
        "singular,plural",
        [("account", "accounts"), ("city", "cities"), ("day", "days"), ("box", "boxes"), ("church", "churches"), ("TAX", "TAXES")],
    )
    def test_pluralize(self, singular, plural):
        assert pluralize(singular) == plural

    def test_indefinite_article_follows_starts_with(self, english):
        assert english.get_article_string(INDEFINITE, VOWEL) == "an"
        assert english.get_article_string(INDEFINITE, CONSONANT) == "a"
        assert english.get_article_string(INDEFINITE, CONSONANT, number=PL) is None
        assert english.get_article_string(DEFINITE) == "the"

    def test_starts_with_inferred_from_spelling(self, english):
        assert english.starts_with_for("Account") is VOWEL
        assert english.starts_with_for("Contact") is CONSONANT


class TestGerman:
    def test_article_tables(self, german):
        n, f, m = LanguageGender.NEUTER, LanguageGender.FEMININE, LanguageGender.MASCULINE
        assert german.get_article_string(DEFINITE, gender=m) == "der"
        assert german.get_article_string(DEFINITE, gender=m, case=ACC) == "den"
        assert german.get_article_string(DEFINITE, gender=f, case=GEN) == "der"
        assert german.get_article_string(DEFINITE, gender=n, number=PL, case=DAT) == "den"
        assert german.get_article_string(INDEFINITE, gender=m, case=DAT) == "einem"
        assert german.get_article_string(INDEFINITE, gender=n, number=PL) is None

    def test_case_endings(self, german):
        konto = Noun(german, "account", {"sg": "Konto", "pl": "Konten"}, NounType.ENTITY, gender=LanguageGender.NEUTER)
        haus = Noun(german, "house", {"sg": "Haus", "pl": "Häuser"}, NounType.ENTITY, gender=LanguageGender.NEUTER)
        firma = Noun(german, "company", {"sg": "Firma", "pl": "Firmen"}, NounType.ENTITY, gender=LanguageGender.FEMININE)
        assert konto.get_string(NounForm(SG, GEN)) == "Kontos"
        assert haus.get_string(NounForm(SG, GEN)) == "Hauses"
        assert firma.get_string(NounForm(SG, GEN)) == "Firma"
        assert haus.get_string(NounForm(PL, DAT)) == "Häusern"
        assert konto.get_string(NounForm(PL, DAT)) == "Konten"

    def test_adjective_endings(self, german):
        neu = Adjective(german, "new", base="neu")
        weak = german.get_adjective_form(SG, NOM, LanguageGender.MASCULINE, article=DEFINITE)
        mixed = german.get_adjective_form(SG, NOM, LanguageGender.NEUTER, article=INDEFINITE)
        strong = german.get_adjective_form(SG, DAT, LanguageGender.MASCULINE)
        assert neu.get_string(weak) == "neue"
        assert neu.get_string(mixed) == "neues"
        assert neu.get_string(strong) == "neuem"

    def test_nouns_keep_capitals_when_lowercased(self, german):
        assert german.format_lowercase_noun("Konto") == "Konto"
        assert get_declension("en").format_lowercase_noun("Account") == "account"


class TestOtherLanguages:
    def test_dutch(self):
        nl = get_declension("nl")
        assert nl.get_article_string(DEFINITE, gender=LanguageGender.NEUTER) == "het"
        assert nl.get_article_string(DEFINITE, gender=LanguageGender.COMMON) == "de"
        boek = Noun(nl, "book", {"sg": "boek"}, NounType.ENTITY, gender=LanguageGender.NEUTER)
        tafel = Noun(nl, "table", {"sg": "tafel"}, NounType.ENTITY)
        assert boek.get_string(NounForm(PL)) == "boeken"
        assert tafel.get_string(NounForm(PL)) == "tafels"

    def test_swedish_definite_suffix(self):
        sv = get_declension("sv")
        konto = Noun(sv, "account", {"sg": "konto", "pl": "konton"}, NounType.ENTITY, gender=LanguageGender.NEUTER)
        bil = Noun(sv, "car", {"sg": "bil", "pl": "bilar"}, NounType.ENTITY, gender=LanguageGender.COMMON)
        assert konto.get_string(NounForm(SG, article=DEFINITE)) == "kontot"
        assert konto.get_string(NounForm(PL, article=DEFINITE)) == "kontona"
        assert bil.get_string(NounForm(SG, article=DEFINITE)) == "bilen"
        assert bil.get_string(NounForm(PL, article=DEFINITE)) == "bilarna"
        assert sv.inflects_article(DEFINITE)
        assert not sv.inflects_article(INDEFINITE)
        assert sv.get_article_string(INDEFINITE, gender=LanguageGender.NEUTER) == "ett"

    def test_french_elision_and_plurals(self):
        fr = get_declension("fr")
        f, m = LanguageGender.FEMININE, LanguageGender.MASCULINE
        assert fr.get_article_string(DEFINITE, VOWEL, f) == "l'"
        assert fr.get_article_string(DEFINITE, CONSONANT, f) == "la"
        assert fr.get_article_string(DEFINITE, CONSONANT, m, PL) == "les"
        assert fr.article_joiner("l'") == ""
        assert fr.article_joiner("le") == " "
        assert fr.pluralize("journal", m) == "journaux"
        assert fr.pluralize("bureau", m) == "bureaux"
        assert fr.pluralize("prix", m) == "prix"

    def test_spanish_special_feminine(self):
        es = get_declension("es")
        f = LanguageGender.FEMININE
        assert es.get_article_string(DEFINITE, SPECIAL, f) == "el"
        assert es.get_article_string(DEFINITE, CONSONANT, f) == "la"
        assert es.get_article_string(INDEFINITE, CONSONANT, f, PL) == "unas"
        assert es.pluralize("luz", f) == "luces"

    def test_italian_onsets(self):
        it = get_declension("it")
        m = LanguageGender.MASCULINE
        assert it.starts_with_for("studente") is SPECIAL
        assert it.starts_with_for("amico") is VOWEL
        assert it.get_article_string(DEFINITE, SPECIAL, m) == "lo"
        assert it.get_article_string(DEFINITE, CONSONANT, m) == "il"
        assert it.get_article_string(DEFINITE, VOWEL, m, PL) == "gli"
        assert it.get_article_string(INDEFINITE, VOWEL, LanguageGender.FEMININE) == "un'"

    def test_russian_has_no_articles(self):
        ru = get_declension("ru")
        assert ru.get_article_string(DEFINITE, gender=LanguageGender.MASCULINE) is None
        schet = Noun(ru, "account", {"sg": "счёт", "sg.g": "счёта"}, NounType.ENTITY)
        assert schet.get_string(NounForm(SG, GEN)) == "счёта"
        assert schet.get_string(NounForm(SG, DAT)) == "счёт"


class TestPluralRules:
    ONE, FEW, MANY, OTHER = PluralCategory.ONE, PluralCategory.FEW, PluralCategory.MANY, PluralCategory.OTHER

    @pytest.mark.parametrize(
        "code, value, expected",
        [
            ("en", "1", ONE),
            ("en", "0", OTHER),
            ("en", "2", OTHER),
            ("en", "1.5", OTHER),
            ("de", "-1", ONE),
            ("pt", "1", ONE),
            ("fr", "0", ONE),
            ("fr", "1.5", ONE),
            ("fr", "2", OTHER),
            ("ru", "1", ONE),
            ("ru", "101", ONE),
            ("ru", "111", MANY),
            ("ru", "4", FEW),
            ("ru", "14", MANY),
            ("ru", "24", FEW),
            ("ru", "0", MANY),
            ("ru", "2.5", OTHER),
            ("ja", "1", OTHER),
        ],
    )
    def test_plural_category(self, code, value, expected):
        assert get_declension(code).plural_category(Decimal(value)) is expected
