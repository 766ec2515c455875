from flask import Blueprint, render_template, current_app
from .decorators import login_required

welcome_bp = Blueprint('welcome', __name__)

@welcome_bp.route('/welcome')
@login_required
def welcome_page():
    """
    Вітальна сторінка для користувача, що увійшов.
    Сесію лише читає декоратор login_required, сторінка її не змінює.
    """
    current_app.logger.info("WELCOME_BP: welcome_page - Рендеринг welcome.html.")
    return render_template('welcome.html', logout_url=current_app.config['LOGOUT_URL'])
