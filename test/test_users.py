import pytest

from auth.security import validate_password, verify_password, get_password_hash
from core.exceptions import ConflictError, NotFoundError, ValidationError
from database.models import User, UserRole
from schemas.user import UserCreate, UserUpdate
from services.auth_service import AuthService


def _create(session, username="admin", password="rahasia123", role=UserRole.ADMINISTRATOR, **kwargs):
    return AuthService.create_user(
        session, UserCreate(username=username, password=password, nama="Admin Sekolah", role=role, **kwargs)
    )


def test_password_is_stored_hashed(session):
    user = _create(session)

    assert user.password_hash != "rahasia123"
    assert user.password_hash.startswith("$2b$")
    assert verify_password("rahasia123", user.password_hash)
    assert not verify_password("salah", user.password_hash)


def test_duplicate_username_conflicts(session):
    _create(session)

    with pytest.raises(ConflictError) as exc_info:
        _create(session, password="lainnya123")
    assert exc_info.value.status_code == 409
    assert session.query(User).count() == 1


@pytest.mark.parametrize("password", ["", "12345", "x" * 73])
def test_invalid_password_rejected(session, password):
    with pytest.raises(ValidationError):
        _create(session, password=password)


def test_validate_password_limits():
    assert validate_password("123456") == (True, None)
    assert validate_password("é" * 36)[0] is True
    assert validate_password("é" * 37)[0] is False


def test_hash_differs_per_call():
    assert get_password_hash("rahasia123") != get_password_hash("rahasia123")


def test_update_password_rehashes(session):
    user = _create(session)
    old_hash = user.password_hash

    updated = AuthService.update_user(session, user.id, UserUpdate(password="baru123456"))

    assert updated.password_hash != old_hash
    assert verify_password("baru123456", updated.password_hash)
    assert updated.updated_at is not None


def test_update_without_password_keeps_hash(session):
    user = _create(session)
    old_hash = user.password_hash

    updated = AuthService.update_user(session, user.id, UserUpdate(nama="Kepala TU", role=UserRole.GURU))

    assert updated.password_hash == old_hash
    assert updated.nama == "Kepala TU"
    assert updated.role == UserRole.GURU


def test_update_username_conflict(session):
    _create(session, username="admin")
    other = _create(session, username="guru1", role=UserRole.GURU)

    with pytest.raises(ConflictError):
        AuthService.update_user(session, other.id, UserUpdate(username="admin"))


def test_update_missing_user(session):
    with pytest.raises(NotFoundError, match="User with id 9 not found"):
        AuthService.update_user(session, 9, UserUpdate(nama="x"))


def test_authenticate_user(session):
    user = _create(session)

    assert AuthService.authenticate_user(session, "admin", "rahasia123").id == user.id
    assert AuthService.authenticate_user(session, "admin", "salah") is None
    assert AuthService.authenticate_user(session, "tidakada", "rahasia123") is None


def test_inactive_user_cannot_authenticate(session):
    _create(session, is_active=False)

    assert AuthService.authenticate_user(session, "admin", "rahasia123") is None


def test_delete_user(session):
    user = _create(session)

    AuthService.delete_user(session, user.id)
    AuthService.delete_user(session, user.id)

    assert AuthService.list_users(session) == []
