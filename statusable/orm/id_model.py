"""声明基类与整数主键

所有模型共用一个 Base（同一个 metadata），CoreModel 在 IdModel 之上加入校验和保存。
"""

from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

Base = declarative_base()


class IdModel(Base):
    """带自增整数主键 id 的抽象模型"""
    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment='主键ID'
    )
