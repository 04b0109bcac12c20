# survey_backend/routes.py

# HTTP surface: JSON auth and survey endpoints plus a health probe.
# Handlers unpack the request, call a service, and map its Ok/Err result onto a response.

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from survey_backend.operations.health_monitor import check_health

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')
survey_bp = Blueprint('survey', __name__, url_prefix='/survey')
health_bp = Blueprint('health', __name__)


def _services():
    return current_app.extensions['survey']


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _bearer_token():
    # None when the header is absent; '' flags a header that is not "Bearer <token>"
    auth_header = request.headers.get('Authorization')
    if auth_header is None:
        return None
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        return ''
    return parts[1]


def _error_response(error):
    return jsonify(error.to_dict()), error.status_code


def _token_or_error():
    token = _bearer_token()
    if token is None:
        return None, (jsonify({'error': 'Missing token'}), 401)
    if token == '':
        return None, (jsonify({'error': 'Invalid token'}), 403)
    return token, None


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = _json_body()
    result = _services().auth.signup(data.get('email'), data.get('password'))
    if not result.ok:
        return _error_response(result.error)
    return jsonify({'token': result.value})


@auth_bp.route('/login', methods=['POST'])
def login():
    data = _json_body()
    result = _services().auth.login(data.get('email'), data.get('password'))
    if not result.ok:
        return _error_response(result.error)
    return jsonify({'token': result.value})


@survey_bp.route('', methods=['POST'])
def submit_survey():
    token, failure = _token_or_error()
    if failure:
        return failure
    data = _json_body()
    result = _services().survey.submit(
        token, data.get('question'), data.get('description'), data.get('answer')
    )
    if not result.ok:
        return _error_response(result.error)
    return jsonify({'message': result.value})


@survey_bp.route('', methods=['GET'])
def list_surveys():
    token, failure = _token_or_error()
    if failure:
        return failure
    result = _services().survey.list(token)
    if not result.ok:
        return _error_response(result.error)
    return jsonify(result.value)


@health_bp.route('/health')
def health():
    status = check_health(_services().db)
    return jsonify(status), 200 if status['status'] == 'ok' else 503


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({'error': e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e):
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({'error': 'Internal server error'}), 500
