# survey_backend/security/input_validator.py

from survey_backend.errors import ValidationError

# Presence and type checks on request input. Payloads are stored verbatim, never rewritten.

QUESTION_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254


class InputValidator:
    def validate_credentials(self, email, password):
        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError("Email and password required")
        if not email or not password:
            raise ValidationError("Email and password required")
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValidationError("Email is too long")
        try:
            email.encode('utf-8')
            password.encode('utf-8')
        except UnicodeEncodeError:
            raise ValidationError("Email and password must be valid UTF-8 text")
        return email, password

    def validate_survey_payload(self, question, description, answer):
        if description is None:
            description = ''
        for name, value in (('question', question), ('description', description), ('answer', answer)):
            if not isinstance(value, str):
                raise ValidationError(f"Field '{name}' must be a string")
            try:
                value.encode('utf-8')
            except UnicodeEncodeError:
                raise ValidationError(f"Field '{name}' must be valid UTF-8 text")
        if len(question) > QUESTION_MAX_LENGTH:
            raise ValidationError(f"Field 'question' must be at most {QUESTION_MAX_LENGTH} characters")
        return question, description, answer
