from model.quran import SurahMeta
from repository.surah_repository import SURAHS, SurahRepository


def test_table_covers_every_surah():
    assert [s.number for s in SURAHS] == list(range(1, 115))
    assert sum(s.verseCount for s in SURAHS) == 6236


def test_table_is_read_only():
    assert isinstance(SURAHS, tuple)
    assert SurahMeta.model_config.get("frozen") is True


def test_get():
    baqarah = SurahRepository.get(2)
    assert baqarah is not None
    assert baqarah.name == "Al-Baqarah"
    assert baqarah.verseCount == 286
    assert SurahRepository.get(0) is None
    assert SurahRepository.get(115) is None


def test_search_by_name_is_case_insensitive():
    names = [s.name for s in SurahRepository.search("BAQARAH")]
    assert names == ["Al-Baqarah"]


def test_search_by_english_name():
    assert [s.number for s in SurahRepository.search("the cow")] == [2]


def test_search_by_number_substring():
    numbers = [s.number for s in SurahRepository.search("11")]
    assert numbers == [11, 110, 111, 112, 113, 114]


def test_blank_search_returns_everything():
    assert len(SurahRepository.search("  ")) == 114
    assert len(SurahRepository.search(None)) == 114
