"""
Data access for the users table.

The *_vulnerable methods splice raw input into SQL text and hand it straight
to the driver. They exist to be exploited; do not copy them.
"""
from typing import List, Optional

from models import SessionLocal, User

USER_COLUMNS = ("id", "username", "password", "email")


def _row_to_user(row) -> User:
    mapping = row._mapping
    return User(**{col: mapping.get(col) for col in USER_COLUMNS})


class UserRepository:

    def _execute_raw(self, sql: str) -> List[User]:
        print(f"[*] Executing query: {sql}")
        session = SessionLocal()
        try:
            result = session.connection().exec_driver_sql(sql)
            return [_row_to_user(row) for row in result]
        finally:
            session.close()

    # VULNERABLE: both values are concatenated into the query text
    def find_by_username_and_password_vulnerable(self, username: str, password: str) -> List[User]:
        sql = "SELECT * FROM users WHERE username = '" + username + "' AND password = '" + password + "'"
        return self._execute_raw(sql)

    # VULNERABLE: search term is concatenated into both LIKE patterns
    def search_users_vulnerable(self, search_term: str) -> List[User]:
        sql = (
            "SELECT * FROM users WHERE username LIKE '%" + search_term
            + "%' OR email LIKE '%" + search_term + "%'"
        )
        return self._execute_raw(sql)

    def find_all(self) -> List[User]:
        session = SessionLocal()
        try:
            users = session.query(User).order_by(User.id).all()
            session.expunge_all()
            return users
        finally:
            session.close()

    def find_by_username_and_password(self, username: str, password: str) -> Optional[User]:
        """Safe lookup with bound parameters, kept for comparison."""
        session = SessionLocal()
        try:
            user = (
                session.query(User)
                .filter(User.username == username, User.password == password)
                .first()
            )
            if user is not None:
                session.expunge(user)
            return user
        finally:
            session.close()

    def save(self, user: User) -> User:
        session = SessionLocal()
        try:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def count(self) -> int:
        session = SessionLocal()
        try:
            return session.query(User).count()
        finally:
            session.close()
