# server/database.py

import logging
from pathlib import Path
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from models import Base


logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and session factory for one application instance.
    Created by the app lifespan (connect), handed to request handlers through
    app.state, and disposed on shutdown (disconnect).
    """

    def __init__(self, url: str):
        self.url = url
        self.engine = None
        self.SessionLocal = None

    def connect(self):
        kwargs = {}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                # one shared connection, otherwise each session sees an empty db
                kwargs["poolclass"] = StaticPool
            else:
                db_file = self.url.split("sqlite:///", 1)[-1]
                Path(db_file).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(self.url, **kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Connected to database {self.engine.url.render_as_string(hide_password=True)}")

    def disconnect(self):
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection disposed")
        self.engine = None
        self.SessionLocal = None

    def session(self) -> Session:
        if self.SessionLocal is None:
            raise RuntimeError("Database is not connected")
        return self.SessionLocal()


def get_db(request: Request):
    db = request.app.state.db.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
