import pytest
from datetime import timedelta

from survey_backend import create_app, db
from survey_backend.config import AppConfig


def make_config(**overrides):
    settings = {
        'jwt_secret_key': 'test_secret_key_with_enough_length_for_hs256',
        'database_url': 'sqlite://',
        'token_ttl': timedelta(hours=1),
        # Cheap Argon2 parameters keep the suite fast
        'password_time_cost': 1,
        'password_memory_cost': 1024,
        'password_parallelism': 1,
    }
    settings.update(overrides)
    return AppConfig(**settings)


@pytest.fixture
def app():
    app = create_app(make_config())
    app.config['TESTING'] = True
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def services(app):
    return app.extensions['survey']


@pytest.fixture
def auth_service(services):
    return services.auth


@pytest.fixture
def survey_service(services):
    return services.survey
