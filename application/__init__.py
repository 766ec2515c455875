from dotenv import load_dotenv

load_dotenv()

import os
from flask import Flask
import logging

from services.session_service import SessionService

APP_NAME = "WelcomePage"

def create_app(test_config=None):
    app = Flask(__name__, instance_relative_config=True)

    is_development = os.environ.get("FLASK_ENV", "production").lower() == "development" or app.debug
    log_level = logging.DEBUG if is_development else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)-8s [%(name)-20s] %(filename)s:%(lineno)d %(funcName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )

    app.logger.setLevel(log_level)

    app.logger.info(f"Запуск створення екземпляра Flask додатку '{APP_NAME}'...")

    app.config.update(
        SECRET_KEY=os.getenv('SECRET_KEY', 'fallback_dev_secret_key_!@#$_SHOULD_BE_CHANGED_IN_PROD'),
        LOGIN_URL=os.getenv('LOGIN_URL', 'index.php'),
        LOGOUT_URL=os.getenv('LOGOUT_URL', 'logout.php'),
        SESSION_FLAG_KEY=os.getenv('SESSION_FLAG_KEY', 'loggedin'),
        SESSION_COOKIE_SECURE= not is_development,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE='Lax',
        SESSION_REFRESH_EACH_REQUEST=False,
    )

    if test_config is not None:
        app.config.update(test_config)
        app.logger.debug(f"Застосовано тестову конфігурацію: {sorted(test_config)}")

    app.logger.info(f"SECRET_KEY {'завантажено з .env' if os.getenv('SECRET_KEY') else 'встановлено за замовчуванням (НЕБЕЗПЕЧНО ДЛЯ PROD!)'}.")
    app.logger.info(
        f"Сторінка входу: '{app.config['LOGIN_URL']}', сторінка виходу: '{app.config['LOGOUT_URL']}', "
        f"ключ прапорця сесії: '{app.config['SESSION_FLAG_KEY']}'."
    )

    if not hasattr(app, 'extensions'):
        app.extensions = {}
    app.extensions['session_service'] = SessionService(flag_key=app.config['SESSION_FLAG_KEY'])
    app.logger.info("SessionService успішно додано до app.extensions.")

    try:
        from .routes_welcome import welcome_bp

        app.register_blueprint(welcome_bp)
        app.logger.info("Blueprints (маршрути) успішно зареєстровано.")
    except ImportError as e:
        app.logger.critical(f"Помилка імпорту або реєстрації блюпринтів: {e}.", exc_info=True)
        raise RuntimeError(f"Не вдалося зареєструвати блюпринти: {e}")

    @app.route('/health_check')
    def health_check():
        app.logger.info("Запит на /health_check отримано. Додаток працює.")
        return f"{APP_NAME} Application is Alive and Healthy!", 200

    app.logger.info(f"Створення екземпляра Flask додатку '{APP_NAME}' успішно завершено.")
    return app
