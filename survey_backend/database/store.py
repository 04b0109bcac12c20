# survey_backend/database/store.py

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from survey_backend.database.models import SurveyResponse, User
from survey_backend.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

# Persistence for users and survey responses. Stores raise; services convert to results.


class CredentialStore:
    def __init__(self, db):
        self.db = db

    def get_user_by_email(self, email):
        try:
            return self.db.session.query(User).filter_by(email=email).first()
        except SQLAlchemyError:
            logger.exception("Failed to look up user")
            self.db.session.rollback()
            raise StorageError()

    def create_user(self, email, password_hash):
        user = User(email=email, password_hash=password_hash)
        try:
            self.db.session.add(user)
            self.db.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent signup with the same email
            self.db.session.rollback()
            raise ConflictError("User already exists")
        except SQLAlchemyError:
            logger.exception("Failed to create user")
            self.db.session.rollback()
            raise StorageError()
        return user


class ResponseStore:
    def __init__(self, db):
        self.db = db

    def add_response(self, user_id, question, description, answer):
        response = SurveyResponse(
            user_id=user_id,
            question=question,
            description=description,
            answer=answer,
        )
        try:
            self.db.session.add(response)
            self.db.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to store survey response for user %s", user_id)
            self.db.session.rollback()
            raise StorageError()
        return response

    def list_responses(self, user_id):
        """Return the user's responses in insertion order."""
        try:
            return (
                self.db.session.query(SurveyResponse)
                .filter_by(user_id=user_id)
                .order_by(SurveyResponse.id.asc())
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Failed to list survey responses for user %s", user_id)
            self.db.session.rollback()
            raise StorageError()
