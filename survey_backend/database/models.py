# survey_backend/database/models.py

from datetime import datetime, timezone

from survey_backend import db

# Database schema: one row per user, one row per submitted questionnaire


def _utcnow():
    return datetime.now(timezone.utc)


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(254), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)  # Argon2id, never plaintext
    created_at = db.Column(db.DateTime, default=_utcnow)

    responses = db.relationship('SurveyResponse', backref='owner', lazy=True)

    def __repr__(self):
        return f'<User {self.id} {self.email}>'


class SurveyResponse(db.Model):
    __tablename__ = 'survey_responses'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    question = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    answer = db.Column(db.Text, nullable=False)  # Opaque serialized submission
    created_at = db.Column(db.DateTime, default=_utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'question': self.question,
            'description': self.description,
            'answer': self.answer,
        }

    def __repr__(self):
        return f'<SurveyResponse {self.id} by User {self.user_id}>'
