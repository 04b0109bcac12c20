# survey_backend/security/token_manager.py
from datetime import timedelta
from flask import current_app, Flask
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

# Stateless JWT bearer tokens asserting {id, email}, using Flask-JWT-Extended
class TokenManager:
    def __init__(self, app: Flask = None, expires_in: timedelta = timedelta(hours=1)):
        self.expires_in = expires_in
        if app:
            self.init_app(app)

    def init_app(self, app: Flask):
        if not app.config.get("JWT_SECRET_KEY"):
            raise RuntimeError("JWT_SECRET_KEY must be configured before issuing tokens")
        app.config.setdefault("JWT_ACCESS_TOKEN_EXPIRES", self.expires_in)

    def generate_token(self, user_id: int, email: str, expires_in: int = None) -> str:
        # Identity goes into 'sub' as a string; email rides along as a custom claim.
        if expires_in is None:
            expires_delta = self.expires_in
        else:
            expires_delta = timedelta(seconds=expires_in)
        return create_access_token(
            identity=str(user_id),
            additional_claims={"email": email},
            expires_delta=expires_delta,
        )

    def validate_token(self, token: str):
        # Return {'id', 'email'} if the token is valid, else None.
        try:
            decoded = decode_token(token, allow_expired=False)
        except (PyJWTError, JWTExtendedException) as e:
            current_app.logger.warning(f"Token validation failed: {str(e)}")
            return None

        if decoded.get("type") != "access":
            current_app.logger.warning("Token validation failed: not an access token")
            return None
        try:
            user_id = int(decoded["sub"])
            email = decoded["email"]
        except (KeyError, TypeError, ValueError):
            current_app.logger.warning("Token validation failed: missing identity claims")
            return None
        return {"id": user_id, "email": email}
