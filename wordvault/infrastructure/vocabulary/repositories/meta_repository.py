"""Repository for application metadata entries."""

from typing import Any

from sqlalchemy.orm import Session

from wordvault.models import AppMeta as AppMetaORM


class MetaRepository:
    """Key/value access to the app_meta table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        orm_model = self.db.get(AppMetaORM, key)
        return orm_model.value if orm_model else None

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Insert or overwrite the value stored under ``key``."""
        orm_model = self.db.get(AppMetaORM, key)
        if orm_model:
            orm_model.value = value
        else:
            self.db.add(AppMetaORM(key=key, value=value))
        self.db.flush()
