from domain.session import SessionContext, DEFAULT_FLAG_KEY

from typing import Any, Mapping
import logging

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, flag_key: str = DEFAULT_FLAG_KEY):
        self.flag_key = flag_key

    def context_for(self, mapping: Mapping[str, Any] | None) -> SessionContext:
        return SessionContext(mapping, flag_key=self.flag_key)

    def is_logged_in(self, context: SessionContext) -> bool:
        """
        Перевіряє, чи встановлено в сесії прапорець входу.
        Відсутній або хибний прапорець означає, що користувач не увійшов.
        Помилка читання сесії також вважається станом "не увійшов".
        """
        try:
            flag_value = context.get_flag()
        except Exception as e:
            logger.error(
                f"SESSION: Не вдалося прочитати прапорець '{context.flag_key}' із сесії: {e}. "
                "Користувач вважається неавтентифікованим.",
                exc_info=True
            )
            return False

        if not flag_value:
            logger.debug(f"SESSION: Прапорець '{context.flag_key}' відсутній або хибний.")
            return False

        logger.debug(f"SESSION: Прапорець '{context.flag_key}' встановлено.")
        return True
