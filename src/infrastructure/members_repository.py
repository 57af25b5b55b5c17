"""SQLAlchemy-backed repository for club members."""

from uuid import uuid4

from sqlalchemy import func, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.members_repository import (
    MemberRecord,
    MembersRepositoryPort,
)
from src.domain.models.members import Member, MemberCategory, MemberStatus
from src.infrastructure.db import storage_errors
from src.infrastructure.schema import members


def _to_member(row) -> Member:
    return Member(
        id=row.id,
        name=row.name,
        nickname=row.nickname,
        status=MemberStatus(row.status),
        category=MemberCategory(row.category),
        is_admin=bool(row.is_admin),
        user_email=row.user_email,
        photo_url=row.photo_url,
    )


def _record_values(record: MemberRecord) -> dict:
    return {
        "name": record.name,
        "nickname": record.nickname,
        "status": record.status.value,
        "category": record.category.value,
        "is_admin": record.is_admin,
        "user_email": record.user_email,
    }


class SqlAlchemyMembersRepository(MembersRepositoryPort):
    """Repository backed by SQLAlchemy for the member registry."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def _fetch_all(self, query, action: str) -> list[Member]:
        engine = self._db_port.get_engine()
        with storage_errors(action):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [_to_member(row) for row in rows]

    def fetch_members(self) -> list[Member]:
        query = select(members).order_by(members.c.nickname, members.c.id)
        return self._fetch_all(query, "Loading members")

    def fetch_member(self, member_id: str) -> Member | None:
        query = select(members).where(members.c.id == member_id)
        found = self._fetch_all(query, "Loading member")
        return found[0] if found else None

    def fetch_nickname_candidates(self, nickname: str) -> list[Member]:
        """Return members whose nickname matches ignoring case, by id.

        Stored nicknames are trimmed before comparing, like the input.
        """
        stored = func.lower(func.trim(members.c.nickname))
        query = (
            select(members)
            .where(stored == nickname.strip().lower())
            .order_by(members.c.id)
        )
        return self._fetch_all(query, "Looking up nickname")

    def fetch_member_by_email(self, email: str) -> Member | None:
        query = (
            select(members)
            .where(func.lower(members.c.user_email) == email.strip().lower())
            .order_by(members.c.id)
        )
        found = self._fetch_all(query, "Looking up member e-mail")
        return found[0] if found else None

    def fetch_contributing_members(self) -> list[Member]:
        query = (
            select(members)
            .where(members.c.status == MemberStatus.ACTIVE.value)
            .where(members.c.category == MemberCategory.CONTRIBUTOR.value)
            .order_by(members.c.id)
        )
        return self._fetch_all(query, "Loading contributing members")

    def insert_member(self, record: MemberRecord) -> Member:
        member = Member(
            id=str(uuid4()),
            name=record.name,
            nickname=record.nickname,
            status=record.status,
            category=record.category,
            is_admin=record.is_admin,
            user_email=record.user_email,
        )
        engine = self._db_port.get_engine()
        with storage_errors("Registering member"):
            with engine.begin() as conn:
                conn.execute(
                    insert(members).values(
                        id=member.id, **_record_values(record)
                    )
                )
        return member

    def update_member(self, member_id: str, record: MemberRecord) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Updating member"):
            with engine.begin() as conn:
                conn.execute(
                    update(members)
                    .where(members.c.id == member_id)
                    .values(**_record_values(record))
                )

    def update_photo_url(self, member_id: str, photo_url: str) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Saving member photo"):
            with engine.begin() as conn:
                conn.execute(
                    update(members)
                    .where(members.c.id == member_id)
                    .values(photo_url=photo_url)
                )


__all__ = ["SqlAlchemyMembersRepository"]
