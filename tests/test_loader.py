import pytest

from langkeys import loader
from langkeys.errors import DirectoryUnreadable, MalformedTranslationFile


@pytest.mark.parametrize(
    "filename, eligible",
    [
        ("lang_en.json", True),
        ("lang_pt_BR.json", True),
        ("lang_longlish.json", False),
        ("lang_comment.json", False),
        ("en.json", False),
        ("lang_en.json.bak", False),
        ("Lang_en.json", False),
    ],
)
def test_is_eligible(filename, eligible):
    assert loader.is_eligible(filename) is eligible


def test_locale_of():
    assert loader.locale_of("lang_pt_BR.json") == "pt_BR"


def test_list_eligible_files(tmp_path, write_lang):
    write_lang("lang_en.json", {"en": {}})
    write_lang("lang_fr.json", {"fr": {}})
    write_lang("lang_comment.json", {"comment": {}})
    write_lang("settings.json", {})
    (tmp_path / "lang_dir.json").mkdir()

    assert sorted(loader.list_eligible_files(str(tmp_path))) == ["lang_en.json", "lang_fr.json"]
    assert loader.has_eligible_files(str(tmp_path))


def test_only_ignored_files(tmp_path, write_lang):
    write_lang("lang_longlish.json", {"longlish": {}})
    write_lang("lang_comment.json", {"comment": {}})
    assert loader.list_eligible_files(str(tmp_path)) == []
    assert not loader.has_eligible_files(str(tmp_path))


def test_missing_directory(tmp_path):
    with pytest.raises(DirectoryUnreadable) as exc_info:
        loader.list_eligible_files(str(tmp_path / "nope"))
    assert exc_info.value.code == "VALIDATION_ERROR"


def test_load_dictionary_uses_first_property(tmp_path, write_lang):
    write_lang("lang_en.json", '{"en": {"#a": "Hi", "#b": ""}, "fr": {"#a": "Salut"}}')
    assert loader.load_dictionary(str(tmp_path), "lang_en.json") == {"#a": "Hi", "#b": ""}


def test_load_dictionary_tolerates_bom(tmp_path):
    (tmp_path / "lang_en.json").write_bytes(b'\xef\xbb\xbf{"en": {"#a": "Hi"}}')
    assert loader.load_dictionary(str(tmp_path), "lang_en.json") == {"#a": "Hi"}


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        '"text"',
        "{}",
        '{"en": ["#a"]}',
        '{"en": {"#a": 0}}',
        '{"en": {"#a": {"nested": "x"}}}',
    ],
)
def test_load_dictionary_rejects_bad_shapes(tmp_path, write_lang, content):
    write_lang("lang_en.json", content)
    with pytest.raises(MalformedTranslationFile) as exc_info:
        loader.load_dictionary(str(tmp_path), "lang_en.json")
    assert exc_info.value.filename == "lang_en.json"
    assert exc_info.value.code == "MALFORMED_FILE"
