# survey_backend/authentication/auth_service.py

import logging

from survey_backend.errors import AuthError, ConflictError, Err, Ok, ServiceError, StorageError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Signup, login and bearer token verification.

    Every operation returns an Ok/Err result instead of raising, so the HTTP
    layer only has to map the error variant onto a status code.
    """

    def __init__(self, credential_store, password_service, token_manager, validator):
        self.credential_store = credential_store
        self.password_service = password_service
        self.token_manager = token_manager
        self.validator = validator

    def signup(self, email, password):
        try:
            email, password = self.validator.validate_credentials(email, password)
            if self.credential_store.get_user_by_email(email) is not None:
                raise ConflictError("User already exists")
            password_hash = self.password_service.hash_password(password)
            user = self.credential_store.create_user(email, password_hash)
        except ConflictError as e:
            logger.info("Signup rejected for %s: email already registered", email)
            return Err(e)
        except ServiceError as e:
            return Err(e)
        except ValueError:
            logger.exception("Password hashing failed during signup")
            return Err(StorageError())

        logger.info("Created user %s (%s)", user.id, user.email)
        return Ok(self.token_manager.generate_token(user.id, user.email))

    def login(self, email, password):
        try:
            email, password = self.validator.validate_credentials(email, password)
            user = self.credential_store.get_user_by_email(email)
        except ServiceError as e:
            return Err(e)

        # Unknown email and wrong password must be indistinguishable to the caller
        if user is None:
            self.password_service.burn_verification(password)
            logger.info("Failed login for %s", email)
            return Err(AuthError(INVALID_CREDENTIALS, status_code=400))
        if not self.password_service.verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            return Err(AuthError(INVALID_CREDENTIALS, status_code=400))

        logger.info("User %s logged in", user.id)
        return Ok(self.token_manager.generate_token(user.id, user.email))

    def verify_token(self, token):
        if not token or not isinstance(token, str):
            return Err(AuthError("Missing token", status_code=401))
        identity = self.token_manager.validate_token(token)
        if identity is None:
            return Err(AuthError("Invalid token", status_code=403))
        return Ok(identity)
