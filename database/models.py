"""
Database models for the student violation tracking system.
"""
from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    ForeignKey, Index, TypeDecorator
)
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import relationship
import enum

from core.utils import date_to_storage, date_from_storage

Base = declarative_base()


# ============================================================================
# Custom Type Decorators
# ============================================================================

class EnumValue(TypeDecorator):
    """Type decorator to ensure enum values (not names) are stored."""
    impl = String
    cache_ok = True

    def __init__(self, enum_class, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.enum_class = enum_class

    def process_bind_param(self, value, dialect):
        """Convert enum to its value when writing to database."""
        if value is None:
            return None
        if isinstance(value, enum.Enum):
            return value.value
        return value

    def process_result_value(self, value, dialect):
        """Convert database value back to enum when reading."""
        if value is None:
            return None
        if isinstance(value, str):
            try:
                return self.enum_class(value)
            except ValueError:
                return value
        return value


class IsoDate(TypeDecorator):
    """
    Calendar date stored as an ISO-8601 "YYYY-MM-DD" string.

    Python code always sees datetime.date; the string form only exists in
    the database. ISO strings sort like the dates they encode, so range
    comparisons work on the stored column.
    """
    impl = String(10)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return date_to_storage(value)

    def process_result_value(self, value, dialect):
        return date_from_storage(value)


# ============================================================================
# Enums - Must be defined before models that use them
# ============================================================================

class UserRole(str, enum.Enum):
    """User roles."""
    ADMINISTRATOR = "administrator"
    GURU = "guru"


class Rombel(str, enum.Enum):
    """Grade band of a class."""
    KELAS_7 = "7"
    KELAS_8 = "8"
    KELAS_9 = "9"


class KategoriPelanggaran(str, enum.Enum):
    """Top-level violation categories."""
    KELAKUAN = "Kelakuan"
    KERAJINAN_PEMBIASAAN = "Kerajinan & Pembiasaan"
    KERAPIAN = "Kerapian"


# ============================================================================
# Models
# ============================================================================

class User(Base):
    """Application account (administrator or teacher role)."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    nama = Column(Text, nullable=False)
    role = Column(EnumValue(UserRole, 20), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index('idx_user_username', 'username'),
    )


class Kelas(Base):
    """Class (rombongan belajar) that owns students."""
    __tablename__ = "kelas"

    id = Column(Integer, primary_key=True, index=True)
    nomor = Column(Integer, nullable=False)
    rombel = Column(EnumValue(Rombel, 2), nullable=False)
    nama_kelas = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    siswa = relationship("Siswa", back_populates="kelas", cascade="all")


class Guru(Base):
    """Teacher who records violations."""
    __tablename__ = "guru"

    id = Column(Integer, primary_key=True, index=True)
    nomor = Column(Integer, nullable=False)
    nama_guru = Column(Text, nullable=False)
    nip = Column(String(20), nullable=False)  # Staff identification number
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    pelanggaran_siswa = relationship("PelanggaranSiswa", back_populates="guru", cascade="all")


class Siswa(Base):
    """Student, belongs to exactly one class."""
    __tablename__ = "siswa"

    id = Column(Integer, primary_key=True, index=True)
    nomor = Column(Integer, nullable=False)
    nama_siswa = Column(Text, nullable=False)
    nisn = Column(String(20), nullable=False)  # National student ID
    kelas_id = Column(Integer, ForeignKey("kelas.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    kelas = relationship("Kelas", back_populates="siswa")
    pelanggaran_siswa = relationship("PelanggaranSiswa", back_populates="siswa", cascade="all")

    __table_args__ = (
        Index('idx_siswa_kelas', 'kelas_id'),
        Index('idx_siswa_nama', 'nama_siswa'),
    )


class DataPelanggaran(Base):
    """Catalogue entry: a violation type with its point value."""
    __tablename__ = "data_pelanggaran"

    id = Column(Integer, primary_key=True, index=True)
    kategori = Column(EnumValue(KategoriPelanggaran, 50), nullable=False)
    jenis_pelanggaran = Column(Text, nullable=False)
    poin = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    pelanggaran_siswa = relationship("PelanggaranSiswa", back_populates="data_pelanggaran", cascade="all")

    __table_args__ = (
        Index('idx_data_pelanggaran_kategori', 'kategori'),
    )


class PelanggaranSiswa(Base):
    """A dated violation by a student, recorded by a teacher."""
    __tablename__ = "pelanggaran_siswa"

    id = Column(Integer, primary_key=True, index=True)
    tanggal = Column(IsoDate(), nullable=False)
    siswa_id = Column(Integer, ForeignKey("siswa.id", ondelete="CASCADE"), nullable=False)
    data_pelanggaran_id = Column(Integer, ForeignKey("data_pelanggaran.id", ondelete="CASCADE"), nullable=False)
    guru_id = Column(Integer, ForeignKey("guru.id", ondelete="CASCADE"), nullable=False)
    bukti_file = Column(Text, nullable=True)  # Evidence file reference, stored elsewhere
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    siswa = relationship("Siswa", back_populates="pelanggaran_siswa")
    data_pelanggaran = relationship("DataPelanggaran", back_populates="pelanggaran_siswa")
    guru = relationship("Guru", back_populates="pelanggaran_siswa")

    __table_args__ = (
        Index('idx_pelanggaran_tanggal', 'tanggal'),
        Index('idx_pelanggaran_siswa', 'siswa_id'),
        Index('idx_pelanggaran_data', 'data_pelanggaran_id'),
        Index('idx_pelanggaran_guru', 'guru_id'),
    )


class PengaturanInstansi(Base):
    """Institution settings. Single row."""
    __tablename__ = "pengaturan_instansi"

    id = Column(Integer, primary_key=True, index=True)
    nama_instansi = Column(Text, nullable=False)
    alamat = Column(Text, nullable=False)
    nama_kepala_sekolah = Column(Text, nullable=False)
    website = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    logo_sekolah = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)
