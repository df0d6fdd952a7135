from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.member_repository import MemberRepository
from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.members = MemberRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Members returned by use cases are read after the block; detach them
        # so the rollback below cannot expire their loaded attributes
        self.session.expunge_all()
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    async def rollback(self):
        await self.session.rollback()
