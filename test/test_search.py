import pytest

from services.siswa_service import SiswaService


@pytest.fixture()
def students(factory):
    kelas = factory.kelas("7A")
    return [
        factory.siswa(kelas, "Siti Aminah", nisn="0098765432", nomor=1),
        factory.siswa(kelas, "Ahmad Fauzi", nisn="0012345678", nomor=2),
        factory.siswa(kelas, "Budi 100%", nisn="0055500011", nomor=3),
        factory.siswa(kelas, "Budi Santoso", nisn="0055500012", nomor=4),
    ]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_returns_nothing(session, students, query):
    assert SiswaService.search_siswa(session, query) == []


def test_search_is_case_insensitive(session, students):
    names = [s.nama_siswa for s in SiswaService.search_siswa(session, "ahmad")]
    assert names == ["Ahmad Fauzi"]


def test_search_matches_middle_of_name(session, students):
    names = [s.nama_siswa for s in SiswaService.search_siswa(session, "amin")]
    assert names == ["Siti Aminah"]


def test_search_matches_nisn(session, students):
    names = [s.nama_siswa for s in SiswaService.search_siswa(session, "23456")]
    assert names == ["Ahmad Fauzi"]


def test_search_results_ordered_by_name(session, students):
    names = [s.nama_siswa for s in SiswaService.search_siswa(session, "a")]
    assert names == sorted(names)
    assert names == ["Ahmad Fauzi", "Budi Santoso", "Siti Aminah"]


def test_search_trims_whitespace(session, students):
    names = [s.nama_siswa for s in SiswaService.search_siswa(session, "  budi  ")]
    assert names == ["Budi 100%", "Budi Santoso"]


def test_wildcards_match_literally(session, students):
    assert [s.nama_siswa for s in SiswaService.search_siswa(session, "%")] == ["Budi 100%"]
    assert SiswaService.search_siswa(session, "_") == []


def test_search_without_match(session, students):
    assert SiswaService.search_siswa(session, "Xavier") == []
