from datetime import date

import pytest
from sqlalchemy import text

from core.exceptions import NotFoundError, ValidationError
from database.models import Guru, KategoriPelanggaran, PelanggaranSiswa, Rombel, Siswa
from schemas.data_pelanggaran import DataPelanggaranUpdate
from schemas.kelas import KelasUpdate
from schemas.pelanggaran_siswa import PelanggaranSiswaCreate, PelanggaranSiswaUpdate
from schemas.siswa import SiswaCreate, SiswaUpdate
from services.data_pelanggaran_service import DataPelanggaranService
from services.guru_service import GuruService
from services.kelas_service import KelasService
from services.pelanggaran_siswa_service import PelanggaranSiswaService
from services.siswa_service import SiswaService


@pytest.fixture()
def seeded(factory):
    kelas = factory.kelas("7A")
    guru = factory.guru()
    jenis = factory.jenis(poin=5)
    siswa = factory.siswa(kelas)
    record = factory.pelanggaran(siswa, jenis, guru, tanggal=date(2024, 1, 15), bukti_file="bukti/1.jpg")
    return {"kelas": kelas, "guru": guru, "jenis": jenis, "siswa": siswa, "record": record}


def test_create_pelanggaran_checks_each_reference(session, seeded):
    base = {
        "tanggal": date(2024, 1, 16),
        "siswa_id": seeded["siswa"].id,
        "data_pelanggaran_id": seeded["jenis"].id,
        "guru_id": seeded["guru"].id,
    }

    with pytest.raises(NotFoundError, match="Student with id 999 not found"):
        PelanggaranSiswaService.create_pelanggaran_siswa(session, PelanggaranSiswaCreate(**{**base, "siswa_id": 999}))
    with pytest.raises(NotFoundError, match="Violation type with id 998 not found"):
        PelanggaranSiswaService.create_pelanggaran_siswa(
            session, PelanggaranSiswaCreate(**{**base, "data_pelanggaran_id": 998})
        )
    with pytest.raises(NotFoundError, match="Teacher with id 997 not found"):
        PelanggaranSiswaService.create_pelanggaran_siswa(session, PelanggaranSiswaCreate(**{**base, "guru_id": 997}))

    assert len(PelanggaranSiswaService.list_pelanggaran_siswa(session)) == 1


def test_create_siswa_requires_existing_kelas(session):
    with pytest.raises(NotFoundError) as exc_info:
        SiswaService.create_siswa(session, SiswaCreate(nomor=1, nama_siswa="Ahmad", nisn="001", kelas_id=42))
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Class with id 42 not found"


def test_update_missing_target_raises_not_found(session):
    with pytest.raises(NotFoundError, match="Class with id 5 not found"):
        KelasService.update_kelas(session, 5, KelasUpdate(nama_kelas="7Z"))
    with pytest.raises(NotFoundError, match="Violation record with id 5 not found"):
        PelanggaranSiswaService.update_pelanggaran_siswa(session, 5, PelanggaranSiswaUpdate(bukti_file=None))


def test_partial_update_keeps_omitted_fields(session, seeded):
    kelas = seeded["kelas"]
    assert kelas.updated_at is None

    updated = KelasService.update_kelas(session, kelas.id, KelasUpdate(nama_kelas="7B"))

    assert updated.nama_kelas == "7B"
    assert updated.nomor == 1
    assert updated.rombel == Rombel.KELAS_7
    assert updated.updated_at is not None
    assert updated.updated_at >= updated.created_at


def test_update_rejects_null_for_required_field(session, seeded):
    with pytest.raises(ValidationError) as exc_info:
        SiswaService.update_siswa(session, seeded["siswa"].id, SiswaUpdate(nama_siswa=None))
    assert exc_info.value.field == "nama_siswa"


def test_update_pelanggaran_can_clear_bukti_file(session, seeded):
    record = seeded["record"]

    updated = PelanggaranSiswaService.update_pelanggaran_siswa(
        session, record.id, PelanggaranSiswaUpdate(bukti_file=None)
    )

    assert updated.bukti_file is None
    assert updated.tanggal == date(2024, 1, 15)


def test_update_pelanggaran_checks_new_reference(session, seeded):
    with pytest.raises(NotFoundError, match="Teacher with id 77 not found"):
        PelanggaranSiswaService.update_pelanggaran_siswa(
            session, seeded["record"].id, PelanggaranSiswaUpdate(guru_id=77)
        )


def test_update_data_pelanggaran_changes_points(session, seeded):
    updated = DataPelanggaranService.update_data_pelanggaran(
        session, seeded["jenis"].id, DataPelanggaranUpdate(poin=15)
    )
    assert updated.poin == 15
    assert updated.kategori == KategoriPelanggaran.KELAKUAN


def test_delete_is_idempotent(session, seeded):
    record_id = seeded["record"].id

    PelanggaranSiswaService.delete_pelanggaran_siswa(session, record_id)
    PelanggaranSiswaService.delete_pelanggaran_siswa(session, record_id)
    KelasService.delete_kelas(session, 12345)
    GuruService.delete_guru(session, 12345)

    assert session.get(PelanggaranSiswa, record_id) is None


def test_delete_kelas_cascades_to_siswa_and_records(session, seeded):
    KelasService.delete_kelas(session, seeded["kelas"].id)

    assert session.query(Siswa).count() == 0
    assert session.query(PelanggaranSiswa).count() == 0
    assert session.query(Guru).count() == 1


def test_delete_guru_cascades_to_records(session, seeded):
    GuruService.delete_guru(session, seeded["guru"].id)

    assert session.query(PelanggaranSiswa).count() == 0
    assert session.query(Siswa).count() == 1


def test_delete_data_pelanggaran_cascades_to_records(session, seeded):
    DataPelanggaranService.delete_data_pelanggaran(session, seeded["jenis"].id)

    assert session.query(PelanggaranSiswa).count() == 0


def test_database_level_cascade(session, seeded):
    # Bypass the ORM: the foreign keys themselves cascade
    session.execute(text("DELETE FROM siswa WHERE id = :id"), {"id": seeded["siswa"].id})
    session.commit()

    assert session.execute(text("SELECT COUNT(*) FROM pelanggaran_siswa")).scalar() == 0


def test_tanggal_stored_as_iso_string(session, seeded):
    stored = session.execute(
        text("SELECT tanggal FROM pelanggaran_siswa WHERE id = :id"), {"id": seeded["record"].id}
    ).scalar()
    assert stored == "2024-01-15"

    session.expire_all()
    assert session.get(PelanggaranSiswa, seeded["record"].id).tanggal == date(2024, 1, 15)


def test_list_data_pelanggaran_by_kategori(session, factory):
    factory.jenis(KategoriPelanggaran.KELAKUAN, "Berkelahi", 10)
    factory.jenis(KategoriPelanggaran.KERAPIAN, "Rambut panjang", 2)
    factory.jenis(KategoriPelanggaran.KERAPIAN, "Seragam tidak rapi", 2)

    kerapian = DataPelanggaranService.list_data_pelanggaran(session, kategori=KategoriPelanggaran.KERAPIAN)

    assert [j.jenis_pelanggaran for j in kerapian] == ["Rambut panjang", "Seragam tidak rapi"]
    assert len(DataPelanggaranService.list_data_pelanggaran(session)) == 3


def test_list_siswa_by_kelas(session, factory):
    kelas_a = factory.kelas("7A")
    kelas_b = factory.kelas("7B", nomor=2)
    factory.siswa(kelas_a, "Zaki", nomor=2)
    factory.siswa(kelas_a, "Ahmad", nomor=1)
    factory.siswa(kelas_b, "Citra")

    names = [s.nama_siswa for s in SiswaService.list_siswa_by_kelas(session, kelas_a.id)]

    assert names == ["Ahmad", "Zaki"]
