"""
数据库会话管理

init_database() 创建引擎和线程隔离的 scoped_session，并把 CoreModel.query
绑定到该 session，生成的状态查询方法（for_status 等）默认从这里取查询。
"""

from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional, Tuple

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, scoped_session, Session
from sqlalchemy.pool import StaticPool

from ..log import get_logger

logger = get_logger("statusable.orm.session")

__all__ = [
    'DatabaseManager',
    'db_manager',
    'init_database',
    'get_engine',
    'db_session_scope',
]

_NOT_INITIALIZED = "数据库未初始化，请先调用 init_database()"


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///", "sqlite:///:memory:")


class DatabaseManager:
    """数据库管理器（单例）

    使用示例:
        from statusable.orm import db_manager

        db_manager.init("sqlite:///./jobs.db")
        session = db_manager.get_session()
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._engine = None
            cls._instance._session_scope = None
        return cls._instance

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None and self._session_scope is not None

    def init(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
        config: Any = None,
        scopefunc: Optional[Callable] = None,
        auto_setup_query: bool = True,
    ) -> Tuple[Engine, scoped_session]:
        """初始化数据库连接

        Args:
            database_url: 数据库连接URL
            echo: 是否输出SQL语句
            config: DatabaseSettings，提供后覆盖 database_url 和 echo
            scopefunc: session 作用域函数，默认按线程隔离
            auto_setup_query: 是否设置 CoreModel.query

        Returns:
            (engine, session_scope)

        Raises:
            ValueError: 没有提供 database_url
        """
        if config is not None:
            database_url = config.url or database_url
            echo = config.echo

        if not database_url:
            raise ValueError("database_url 是必需的，请通过参数或 config 提供")

        if _is_sqlite_memory(database_url):
            # 内存库每个连接都是独立的空库，所有 session 共用一个连接
            self._engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self._engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
        logger.info(f"数据库引擎创建成功: {self._engine.url!r}")

        self._session_scope = scoped_session(
            sessionmaker(autoflush=True, bind=self._engine),
            scopefunc=scopefunc,
        )

        if auto_setup_query:
            # 延迟导入避免循环依赖
            from .core_model import CoreModel
            CoreModel.query = self._session_scope.query_property()
            logger.debug("CoreModel.query 已绑定")

        return self._engine, self._session_scope

    def get_session(self) -> Session:
        """当前作用域的 session，提交和清理由调用方负责"""
        if self._session_scope is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._session_scope()

    def cleanup(self):
        """移除当前作用域的 session，未提交的更改被丢弃"""
        if self._session_scope is not None and self._session_scope.registry.has():
            self._session_scope.remove()

    def dispose(self):
        """释放引擎并回到未初始化状态"""
        self.cleanup()
        if self._engine is not None:
            self._engine.dispose()
            logger.debug("数据库引擎已释放")
        self._engine = None
        self._session_scope = None


db_manager = DatabaseManager()


def init_database(
    database_url: Optional[str] = None,
    echo: bool = False,
    config: Any = None,
    scopefunc: Optional[Callable] = None,
    auto_setup_query: bool = True,
) -> Tuple[Engine, scoped_session]:
    """db_manager.init() 的快捷方式"""
    return db_manager.init(
        database_url,
        echo=echo,
        config=config,
        scopefunc=scopefunc,
        auto_setup_query=auto_setup_query,
    )


def get_engine() -> Engine:
    return db_manager.engine


@contextmanager
def db_session_scope(auto_commit: bool = True) -> Generator[Session, None, None]:
    """session 上下文

    正常退出时提交（auto_commit=True），出错时回滚，最后移除 session。

    使用示例:
        with db_session_scope():
            Job.get(job_id).set_status_running(save=True)
    """
    session = db_manager.get_session()
    try:
        yield session
        if auto_commit:
            session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        db_manager.cleanup()
