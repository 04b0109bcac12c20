# survey_backend/survey_service.py

import logging

from survey_backend.errors import Err, Ok, ServiceError

logger = logging.getLogger(__name__)

# Stores questionnaire submissions and lists them back, scoped to the token's user.
# The answer blob is opaque here: it is never parsed or validated for shape.


class SurveyService:
    def __init__(self, auth_service, response_store, validator):
        self.auth_service = auth_service
        self.response_store = response_store
        self.validator = validator

    def submit(self, token, question, description, answer):
        verified = self.auth_service.verify_token(token)
        if not verified.ok:
            return verified
        user_id = verified.value['id']

        try:
            question, description, answer = self.validator.validate_survey_payload(
                question, description, answer
            )
            response = self.response_store.add_response(user_id, question, description, answer)
        except ServiceError as e:
            return Err(e)

        logger.info("Stored survey response %s for user %s", response.id, user_id)
        return Ok("Response saved")

    def list(self, token):
        verified = self.auth_service.verify_token(token)
        if not verified.ok:
            return verified
        user_id = verified.value['id']

        try:
            responses = self.response_store.list_responses(user_id)
        except ServiceError as e:
            return Err(e)
        return Ok([response.to_dict() for response in responses])
