from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from .config import settings
from .core.exception import ConfigurationFailureException

# Configure database engine with appropriate settings
if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite doesn't support connection pooling arguments
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=settings.DEBUG
    )
else:
    # Configure connection pool for PostgreSQL/MySQL
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,   # Recycle connections after 1 hour
        pool_size=10,
        max_overflow=20,
        echo=settings.DEBUG
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Database session dependency for FastAPI.
    Properly manages session lifecycle - creates, yields, and closes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Dialects whose row-level security policies read the session setting
SESSION_SETTING_DIALECTS = ("postgresql",)


def _set_session_setting(connection, username: str) -> None:
    try:
        connection.execute(
            text("SELECT set_config(:name, :value, true)"),
            {"name": settings.SESSION_CONTEXT_KEY, "value": username},
        )
    except SQLAlchemyError as ex:
        raise ConfigurationFailureException(
            "Could not apply the session context for the current family"
        ) from ex


@event.listens_for(Session, "after_begin")
def _reapply_session_context(session, transaction, connection) -> None:
    """
    Re-issue the transaction-local setting at the start of every transaction.

    Commits end the transaction that carried the setting, and reads after a
    commit (refreshes, lazy loads during serialization) run in a new one.
    """
    username = session.info.get(settings.SESSION_CONTEXT_KEY)
    if username is None or connection.dialect.name not in SESSION_SETTING_DIALECTS:
        return
    _set_session_setting(connection, username)


def apply_session_context(db: Session, username: str) -> None:
    """
    Attach the acting family to the store session.

    On PostgreSQL this sets the transaction-local setting consumed by the
    row-level security policies, and the ``after_begin`` hook above sets it
    again for every later transaction of the session. Other dialects have no
    such policies, so the value is only recorded in ``Session.info``.

    Raises:
        ConfigurationFailureException: If the store rejects the setting
    """
    db.info[settings.SESSION_CONTEXT_KEY] = username

    if db.get_bind().dialect.name not in SESSION_SETTING_DIALECTS:
        return

    if db.in_transaction():
        _set_session_setting(db.connection(), username)
    else:
        # Beginning the transaction fires the hook, which applies the setting
        db.connection()
