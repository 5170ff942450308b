"""Process-wide registry of error codes and categories for logzen."""

import threading
from typing import Any


class ErrorRegistry:
    """Singleton registry for all error codes and categories."""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(self, name: str, parent: Any = None) -> Any:
        """Get or create a category.

        Args:
            name: The category name
            parent: Optional parent category

        Returns:
            The ErrorCategory
        """
        with self._lock:
            if name in self._categories:
                return self._categories[name]

            from logzen.errors.base import ErrorCategory

            category = ErrorCategory(name, parent)
            self._categories[name] = category
            return category

    def get_code(self, code: str, category_name: str = "INTERNAL") -> Any:
        """Get or create an error code.

        Args:
            code: The error code
            category_name: The category name (defaults to INTERNAL)

        Returns:
            The ErrorCode
        """
        with self._lock:
            key = f"{category_name}.{code}"
            if key in self._codes:
                return self._codes[key]

            from logzen.errors.base import ErrorCode

            error_code = ErrorCode(code, self.get_category(category_name))
            self._codes[key] = error_code
            return error_code

    def lookup_code(self, code: str) -> Any:
        """Look up an error code by its bare name without creating it."""
        with self._lock:
            for error_code in self._codes.values():
                if error_code.code == code:
                    return error_code
        return None

    def get_all_categories(self) -> list[Any]:
        with self._lock:
            return list(self._categories.values())


registry = ErrorRegistry()
