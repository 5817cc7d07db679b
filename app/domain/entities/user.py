from sqlalchemy import Column, String
import uuid
from app.core.db import Base


def new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    # id é atribuído pelo banco no insert, nunca pelo request
    id = Column(String(32), primary_key=True, default=new_user_id)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    password = Column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, name={self.name!r}, email={self.email!r})>"
