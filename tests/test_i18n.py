from src.domain.i18n import FALLBACKS, TRANSLATIONS, Language, TranslationKey, translate


def test_every_key_has_an_english_fallback():
    assert set(FALLBACKS) == set(TranslationKey)


def test_translated_tables_only_use_known_keys():
    for table in TRANSLATIONS.values():
        assert set(table) <= set(TranslationKey)


def test_translate_chinese():
    assert translate(TranslationKey.NEXT, Language.ZH) == "下一步"


def test_missing_key_falls_back_to_english():
    assert TranslationKey.VIEW_RESULTS not in TRANSLATIONS[Language.MS]
    assert translate(TranslationKey.VIEW_RESULTS, Language.MS) == "View Results"


def test_language_given_as_code():
    assert translate(TranslationKey.BACK, "ms") == "Kembali"


def test_parameters_are_interpolated():
    text = translate(TranslationKey.STEP_PROGRESS, Language.EN, current="3", total="13")
    assert text == "Step 3 of 13"
