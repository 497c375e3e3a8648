import pytest

import config
from core.exceptions import ValidationError
from database.models import PengaturanInstansi
from schemas.pengaturan import PengaturanInstansiUpdate
from services.pengaturan_service import PengaturanService


def test_no_settings_before_first_save(session):
    assert PengaturanService.get_pengaturan(session) is None


def test_get_or_create_uses_defaults(session):
    pengaturan = PengaturanService.get_or_create_pengaturan(session, PengaturanInstansiUpdate())

    assert pengaturan.nama_instansi == config.DEFAULT_NAMA_INSTANSI
    assert pengaturan.alamat == config.DEFAULT_ALAMAT
    assert pengaturan.nama_kepala_sekolah == config.DEFAULT_NAMA_KEPALA_SEKOLAH
    assert pengaturan.website is None


def test_get_or_create_returns_existing_row(session):
    first = PengaturanService.get_or_create_pengaturan(
        session, PengaturanInstansiUpdate(nama_instansi="SMP Negeri 1")
    )
    second = PengaturanService.get_or_create_pengaturan(
        session, PengaturanInstansiUpdate(nama_instansi="SMP Negeri 2")
    )

    assert second.id == first.id
    assert second.nama_instansi == "SMP Negeri 1"


def test_first_update_creates_row(session):
    pengaturan = PengaturanService.update_pengaturan(
        session, PengaturanInstansiUpdate(nama_instansi="SMP Negeri 1", email="tu@smpn1.sch.id")
    )

    assert pengaturan.nama_instansi == "SMP Negeri 1"
    assert pengaturan.email == "tu@smpn1.sch.id"
    assert pengaturan.alamat == config.DEFAULT_ALAMAT
    assert session.query(PengaturanInstansi).count() == 1


def test_update_is_partial_and_keeps_single_row(session):
    PengaturanService.update_pengaturan(
        session,
        PengaturanInstansiUpdate(nama_instansi="SMP Negeri 1", alamat="Jl. Merdeka 1", website="https://smpn1.sch.id")
    )

    updated = PengaturanService.update_pengaturan(session, PengaturanInstansiUpdate(alamat="Jl. Sudirman 2"))

    assert updated.nama_instansi == "SMP Negeri 1"
    assert updated.alamat == "Jl. Sudirman 2"
    assert updated.website == "https://smpn1.sch.id"
    assert updated.updated_at is not None
    assert session.query(PengaturanInstansi).count() == 1


def test_optional_fields_can_be_cleared(session):
    PengaturanService.update_pengaturan(session, PengaturanInstansiUpdate(website="https://smpn1.sch.id"))

    updated = PengaturanService.update_pengaturan(session, PengaturanInstansiUpdate(website=None))

    assert updated.website is None


def test_required_fields_cannot_be_cleared(session):
    PengaturanService.update_pengaturan(session, PengaturanInstansiUpdate(nama_instansi="SMP Negeri 1"))

    with pytest.raises(ValidationError):
        PengaturanService.update_pengaturan(session, PengaturanInstansiUpdate(nama_instansi=None))
