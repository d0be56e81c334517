# models.py
from sqlalchemy import create_engine, Column, Integer, String
from sqlalchemy.orm import declarative_base, sessionmaker

from config import DB_URL, SEED_USERS

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)
engine = None


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)  # stored in clear on purpose
    email = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"


def bind_engine(db_url=DB_URL):
    """Create the engine for db_url and point SessionLocal at it."""
    global engine
    engine = create_engine(
        db_url,
        connect_args={"check_same_thread": False} if db_url.startswith("sqlite") else {},
    )
    SessionLocal.configure(bind=engine)
    return engine


def init_db():
    Base.metadata.create_all(bind=engine)


def seed_users(rows=None):
    """Insert the demo accounts if the users table is empty. Returns rows added."""
    from repository import UserRepository

    repo = UserRepository()
    if repo.count() > 0:
        return 0

    rows = SEED_USERS if rows is None else rows
    for row in rows:
        repo.save(User(**row))
    return len(rows)


bind_engine()
