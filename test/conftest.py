import os

# Must be set before config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date

import pytest
from fastapi.testclient import TestClient

import config
from database.connection import Database
from database.models import Rombel, KategoriPelanggaran
from schemas.kelas import KelasCreate
from schemas.guru import GuruCreate
from schemas.siswa import SiswaCreate
from schemas.data_pelanggaran import DataPelanggaranCreate
from schemas.pelanggaran_siswa import PelanggaranSiswaCreate
from services.kelas_service import KelasService
from services.guru_service import GuruService
from services.siswa_service import SiswaService
from services.data_pelanggaran_service import DataPelanggaranService
from services.pelanggaran_siswa_service import PelanggaranSiswaService


@pytest.fixture()
def database():
    """Fresh in-memory database, installed as the application database."""
    db = Database("sqlite://")
    db.create_tables()
    config.db = db
    yield db
    config.db = None
    db.drop_tables()
    db.dispose()


@pytest.fixture()
def session(database):
    s = database.SessionLocal()
    yield s
    s.close()


@pytest.fixture()
def client(database):
    # No context manager: the lifespan would replace config.db with the configured database
    from app import app
    return TestClient(app)


class Factory:
    """Shortcuts for creating rows through the services."""

    def __init__(self, session):
        self.session = session

    def kelas(self, nama_kelas="7A", rombel=Rombel.KELAS_7, nomor=1):
        return KelasService.create_kelas(
            self.session, KelasCreate(nomor=nomor, rombel=rombel, nama_kelas=nama_kelas)
        )

    def guru(self, nama_guru="Pak Budi", nip="198001012005011001", nomor=1):
        return GuruService.create_guru(
            self.session, GuruCreate(nomor=nomor, nama_guru=nama_guru, nip=nip)
        )

    def siswa(self, kelas, nama_siswa="Ahmad", nisn="0012345678", nomor=1):
        return SiswaService.create_siswa(
            self.session, SiswaCreate(nomor=nomor, nama_siswa=nama_siswa, nisn=nisn, kelas_id=kelas.id)
        )

    def jenis(self, kategori=KategoriPelanggaran.KELAKUAN, jenis_pelanggaran="Berkelahi", poin=5):
        return DataPelanggaranService.create_data_pelanggaran(
            self.session,
            DataPelanggaranCreate(kategori=kategori, jenis_pelanggaran=jenis_pelanggaran, poin=poin)
        )

    def pelanggaran(self, siswa, jenis, guru, tanggal=date(2024, 1, 15), bukti_file=None):
        return PelanggaranSiswaService.create_pelanggaran_siswa(
            self.session,
            PelanggaranSiswaCreate(
                tanggal=tanggal,
                siswa_id=siswa.id,
                data_pelanggaran_id=jenis.id,
                guru_id=guru.id,
                bukti_file=bukti_file,
            )
        )


@pytest.fixture()
def factory(session):
    return Factory(session)
