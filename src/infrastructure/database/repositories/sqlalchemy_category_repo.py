"""SQLAlchemy implementation of the project category repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project import ProjectCategory
from infrastructure.database.models import ProjectCategoryModel


class SQLAlchemyCategoryRepository:
    """SQLAlchemy implementation of ICategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_all(self) -> list[ProjectCategory]:
        stmt = select(ProjectCategoryModel).order_by(ProjectCategoryModel.sort_order)
        result = await self._session.execute(stmt)
        return [
            ProjectCategory(id=model.id, label=model.label, order=model.sort_order)
            for model in result.scalars()
        ]

    async def replace_all(self, categories: list[ProjectCategory]) -> list[ProjectCategory]:
        keep = {category.id for category in categories}
        result = await self._session.execute(select(ProjectCategoryModel))
        existing = {model.id: model for model in result.scalars()}
        for model_id, model in existing.items():
            if model_id not in keep:
                await self._session.delete(model)

        for category in categories:
            model = existing.get(category.id)
            if model is None:
                self._session.add(
                    ProjectCategoryModel(
                        id=category.id, label=category.label, sort_order=category.order
                    )
                )
            else:
                model.label = category.label
                model.sort_order = category.order

        await self._session.flush()
        return await self.get_all()
