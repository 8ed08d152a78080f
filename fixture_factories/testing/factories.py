"""Factory Boy helpers the generated factories inherit from."""

from __future__ import annotations

from factory.alchemy import SQLAlchemyModelFactory


class SQLAlchemySession:
    """Store the session provided by the pytest fixture layer."""

    _session = None

    @classmethod
    def set(cls, session):
        """Register the SQLAlchemy session used to persist factory objects."""
        cls._session = session

    @classmethod
    def get(cls):
        """Return the registered SQLAlchemy session.

        Returns
        -------
        sqlalchemy.orm.Session | sqlalchemy.orm.scoped_session
            Session the generated factories persist through.

        Raises
        ------
        RuntimeError
            If factories are used before a session was registered.
        """
        if cls._session is None:
            raise RuntimeError(
                "Factories session not set. Call SQLAlchemySession.set() from a fixture."
            )
        return cls._session


class BaseFactory(SQLAlchemyModelFactory):
    """Base class configuring Factory Boy for the registered session."""

    class Meta:
        abstract = True
        # A callable keeps Factory Boy lazy, so the session registered by the
        # current test is used rather than the one present at import time.
        sqlalchemy_session_factory = SQLAlchemySession.get
        sqlalchemy_session_persistence = "flush"

    @classmethod
    def _after_postgeneration(cls, instance, create, results=None):
        """Flush objects attached by post-generation helpers of a created instance."""
        if create and results:
            SQLAlchemySession.get().flush()
