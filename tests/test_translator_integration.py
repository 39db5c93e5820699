import pytest

from translator import FormatError, Translator
from translator.parser import parse_file


def test_name_file(word_list):
    translator = Translator.from_file(word_list("en-fr"))
    assert translator.name == "en-fr"
    assert translator.is_empty()


def test_not_empty(word_list):
    translator = Translator.from_file(word_list("en-fr", "against = contre", "against = versus"))
    assert not translator.is_empty()


def test_add_translations_to_loaded_list(word_list):
    translator = Translator.from_file(word_list("en-fr"))
    translator.add_translation("against", "contre")
    translator.add_translation("against", "versus")
    assert translator.get_translation("against") == ["contre", "versus"]


def test_forward_and_reverse(word_list):
    translator = Translator.from_file(word_list("en-fr", "against = contre", "against = versus"))
    assert translator.get_translation("against") == ["contre", "versus"]
    assert translator.get_translation("contre") == ["against"]
    assert translator.get_translation("pour") == []


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    translator = Translator.from_file(path)
    assert translator.name == ""
    assert translator.get_translation("against") == []


def test_erroneous_file(word_list):
    path = word_list("en-fr", "against = ", "against = ")
    with pytest.raises(FormatError) as excinfo:
        Translator.from_file(path)
    assert excinfo.value.source == str(path)
    assert excinfo.value.line_number == 2


def test_blank_line_rejected_by_default(word_list):
    path = word_list("en-fr", "against = contre", "", "for = pour")
    with pytest.raises(FormatError):
        Translator.from_file(path)
    translator = Translator.from_file(path, skip_blank_lines=True)
    assert translator.words() == ["against", "for"]


def test_parse_file(word_list):
    entries = parse_file(word_list("en-fr", "against = contre"))
    assert entries.name == "en-fr"
    assert entries.translations == {"against": ["contre"]}


def test_misdecoded_file_is_rejected(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes("fr-en\nété = summer\nxy\n".encode("latin-1"))
    with pytest.raises(FormatError) as excinfo:
        Translator.from_file(path)
    assert excinfo.value.line_number == 2
