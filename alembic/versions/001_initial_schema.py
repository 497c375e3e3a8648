"""Initial schema - users, classes, teachers, students, violation catalogue, violation records, institution settings

Revision ID: 001
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('nama', sa.Text(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username')
    )
    op.create_index('idx_user_username', 'users', ['username'])

    op.create_table(
        'kelas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nomor', sa.Integer(), nullable=False),
        sa.Column('rombel', sa.String(length=2), nullable=False),
        sa.Column('nama_kelas', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("rombel IN ('7', '8', '9')", name='ck_kelas_rombel')
    )

    op.create_table(
        'guru',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nomor', sa.Integer(), nullable=False),
        sa.Column('nama_guru', sa.Text(), nullable=False),
        sa.Column('nip', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'siswa',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nomor', sa.Integer(), nullable=False),
        sa.Column('nama_siswa', sa.Text(), nullable=False),
        sa.Column('nisn', sa.String(length=20), nullable=False),
        sa.Column('kelas_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['kelas_id'], ['kelas.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_siswa_kelas', 'siswa', ['kelas_id'])
    op.create_index('idx_siswa_nama', 'siswa', ['nama_siswa'])

    op.create_table(
        'data_pelanggaran',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('kategori', sa.String(length=50), nullable=False),
        sa.Column('jenis_pelanggaran', sa.Text(), nullable=False),
        sa.Column('poin', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "kategori IN ('Kelakuan', 'Kerajinan & Pembiasaan', 'Kerapian')",
            name='ck_data_pelanggaran_kategori'
        )
    )
    op.create_index('idx_data_pelanggaran_kategori', 'data_pelanggaran', ['kategori'])

    # tanggal is stored as an ISO-8601 "YYYY-MM-DD" string
    op.create_table(
        'pelanggaran_siswa',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tanggal', sa.String(length=10), nullable=False),
        sa.Column('siswa_id', sa.Integer(), nullable=False),
        sa.Column('data_pelanggaran_id', sa.Integer(), nullable=False),
        sa.Column('guru_id', sa.Integer(), nullable=False),
        sa.Column('bukti_file', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['siswa_id'], ['siswa.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['data_pelanggaran_id'], ['data_pelanggaran.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['guru_id'], ['guru.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_pelanggaran_tanggal', 'pelanggaran_siswa', ['tanggal'])
    op.create_index('idx_pelanggaran_siswa', 'pelanggaran_siswa', ['siswa_id'])
    op.create_index('idx_pelanggaran_data', 'pelanggaran_siswa', ['data_pelanggaran_id'])
    op.create_index('idx_pelanggaran_guru', 'pelanggaran_siswa', ['guru_id'])

    op.create_table(
        'pengaturan_instansi',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nama_instansi', sa.Text(), nullable=False),
        sa.Column('alamat', sa.Text(), nullable=False),
        sa.Column('nama_kepala_sekolah', sa.Text(), nullable=False),
        sa.Column('website', sa.Text(), nullable=True),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('logo_sekolah', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('pengaturan_instansi')
    op.drop_index('idx_pelanggaran_guru', table_name='pelanggaran_siswa')
    op.drop_index('idx_pelanggaran_data', table_name='pelanggaran_siswa')
    op.drop_index('idx_pelanggaran_siswa', table_name='pelanggaran_siswa')
    op.drop_index('idx_pelanggaran_tanggal', table_name='pelanggaran_siswa')
    op.drop_table('pelanggaran_siswa')
    op.drop_index('idx_data_pelanggaran_kategori', table_name='data_pelanggaran')
    op.drop_table('data_pelanggaran')
    op.drop_index('idx_siswa_nama', table_name='siswa')
    op.drop_index('idx_siswa_kelas', table_name='siswa')
    op.drop_table('siswa')
    op.drop_table('guru')
    op.drop_table('kelas')
    op.drop_index('idx_user_username', table_name='users')
    op.drop_table('users')
