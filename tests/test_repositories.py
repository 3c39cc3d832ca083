"""
Tests for the entity stores.

Repositories are exercised directly against the in-memory database, without
any validation in front of them.

Verifies:
- Lookups raise NotFoundError when nothing matches
- Soft deleted rows disappear from every lookup
- Unique columns are enforced by the database
"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.exceptions import InvalidAgeError, NotFoundError
from domain.models import Gallery, User
from repositories.gallery_repository import GalleryRepository
from repositories.user_repository import UserRepository
from test_fixtures import unique_email


def stored_user(repo, age=30, **kwargs):
    fields = {
        "name": "Priya Raman",
        "age": age,
        "email": unique_email("priya"),
        "password_hash": "bcrypt-hash",
        "remember_hash": unique_email("remember"),
    }
    fields.update(kwargs)
    return repo.create(User(**fields))


# =============================================================================
# USER REPOSITORY
# =============================================================================


class TestUserRepository:
    def test_create_assigns_id_and_timestamps(self, db_session):
        repo = UserRepository(db_session)
        user = stored_user(repo)

        assert user.id > 0
        assert user.created_at is not None
        assert user.deleted_at is None

    def test_by_id(self, db_session):
        repo = UserRepository(db_session)
        user = stored_user(repo)

        assert repo.by_id(user.id).email == user.email

    def test_by_id_missing(self, db_session):
        with pytest.raises(NotFoundError):
            UserRepository(db_session).by_id(9999)

    def test_by_email_and_remember_hash(self, db_session):
        repo = UserRepository(db_session)
        user = stored_user(repo, remember_hash="hashed-token")

        assert repo.by_email(user.email).id == user.id
        assert repo.by_remember("hashed-token").id == user.id
        with pytest.raises(NotFoundError):
            repo.by_remember("other-hash")

    def test_by_age(self, db_session):
        repo = UserRepository(db_session)
        user = stored_user(repo, age=41)

        assert repo.by_age(41).id == user.id
        with pytest.raises(NotFoundError):
            repo.by_age(99)

    def test_by_age_zero_is_invalid(self, db_session):
        with pytest.raises(InvalidAgeError):
            UserRepository(db_session).by_age(0)

    def test_by_age_range_is_inclusive(self, db_session):
        repo = UserRepository(db_session)
        for age in (17, 18, 25, 30, 31):
            stored_user(repo, age=age)

        ages = sorted(u.age for u in repo.by_age_range(18, 30))
        assert ages == [18, 25, 30]

    def test_update_saves_changes(self, db_session):
        repo = UserRepository(db_session)
        user = stored_user(repo)

        user.name = "Priya R."
        repo.update(user)
        db_session.expire_all()

        assert repo.by_id(user.id).name == "Priya R."

    def test_soft_delete(self, db_session):
        """
        Verifies:
        - Deleted users are no longer found by any lookup
        - The row itself stays in the table with deleted_at set
        """
        repo = UserRepository(db_session)
        user = stored_user(repo, age=52)
        repo.delete(user)

        with pytest.raises(NotFoundError):
            repo.by_id(user.id)
        with pytest.raises(NotFoundError):
            repo.by_email(user.email)
        with pytest.raises(NotFoundError):
            repo.by_age(52)

        row = db_session.query(User).filter(User.id == user.id).one()
        db_session.refresh(row)
        assert row.deleted_at is not None

    def test_duplicate_email_is_rejected_by_database(self, db_session):
        repo = UserRepository(db_session)
        email = unique_email("dup")
        stored_user(repo, email=email)

        with pytest.raises(IntegrityError):
            stored_user(repo, email=email)

        # The session was rolled back and is usable again
        assert stored_user(repo).id > 0


# =============================================================================
# GALLERY REPOSITORY
# =============================================================================


class TestGalleryRepository:
    def test_by_user_id(self, db_session):
        repo = GalleryRepository(db_session)
        repo.create(Gallery(title="Porto", user_id=1))
        repo.create(Gallery(title="Madeira", user_id=1))
        repo.create(Gallery(title="Oslo", user_id=2))

        titles = sorted(g.title for g in repo.by_user_id(1))
        assert titles == ["Madeira", "Porto"]
        assert repo.by_user_id(3) == []

    def test_loaded_gallery_has_no_images(self, db_session):
        repo = GalleryRepository(db_session)
        gallery = repo.create(Gallery(title="Porto", user_id=1))
        db_session.expunge_all()

        loaded = repo.by_id(gallery.id)
        assert loaded is not gallery
        assert loaded.images == []

    def test_soft_delete_hides_gallery(self, db_session):
        repo = GalleryRepository(db_session)
        gallery = repo.create(Gallery(title="Porto", user_id=1))
        repo.delete(gallery)

        with pytest.raises(NotFoundError):
            repo.by_id(gallery.id)
        assert repo.by_user_id(1) == []


# =============================================================================
# SCHEMA
# =============================================================================


def test_destructive_reset_empties_tables(engine, db_session):
    from domain.models import destructive_reset

    repo = UserRepository(db_session)
    stored_user(repo)
    db_session.close()

    destructive_reset(engine)

    assert UserRepository(db_session).by_age_range(0, 200) == []
