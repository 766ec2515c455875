from typing import Any, Mapping

DEFAULT_FLAG_KEY = 'loggedin'


class SessionContext:
    """
    Явний контекст сесії поточного запиту.
    Лише читає дані сесії і ніколи їх не змінює.
    """

    def __init__(self, mapping: Mapping[str, Any] | None, flag_key: str = DEFAULT_FLAG_KEY):
        self._mapping = mapping if mapping is not None else {}
        self.flag_key = flag_key

    def get(self, key: str, default: Any = None) -> Any:
        return self._mapping.get(key, default)

    def get_flag(self) -> Any:
        return self.get(self.flag_key)

    def __repr__(self):
        return f"SessionContext(flag_key='{self.flag_key}')"
