from functools import wraps
from flask import session, current_app, request, Response


def redirect_without_body(location: str) -> Response:
    return Response(status=302, headers={'Location': location})


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        session_service = current_app.extensions['session_service']
        context = session_service.context_for(session)
        if not session_service.is_logged_in(context):
            login_url = current_app.config['LOGIN_URL']
            current_app.logger.info(
                f"DECORATORS: login_required - Немає активної сесії для '{request.path}'. "
                f"Перенаправлення на '{login_url}'."
            )
            return redirect_without_body(login_url)
        return f(*args, **kwargs)
    return decorated_function
