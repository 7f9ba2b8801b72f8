"""Language Strings: centralized locale-specific text for user-facing messages.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every key exists for every Locale member
    - Used by validate_entry (reasons), classify_errors and sync_engine (last error),
      schema_lab (placeholders and fallbacks)

Design Decisions:
    - Flat key -> {locale: text} table: one lookup helper, no gettext catalog
    - Russian is the product language; English mirrors it for non-Russian deployments
"""

from recordbook.core.domain_types import Locale

_STRINGS: dict[str, dict[Locale, str]] = {
    # --- Validation reasons ---------------------------------------------------
    "user_name_too_short": {
        Locale.EN: "Name must contain at least 2 characters.",
        Locale.RU: "Имя должно содержать минимум 2 символа.",
    },
    "user_email_invalid": {
        Locale.EN: "Invalid email address.",
        Locale.RU: "Некорректный адрес электронной почты.",
    },
    "category_name_too_short": {
        Locale.EN: "Category name must contain at least 3 characters.",
        Locale.RU: "Название категории должно содержать минимум 3 символа.",
    },
    "record_title_too_short": {
        Locale.EN: "Title must contain at least 3 characters.",
        Locale.RU: "Заголовок должен содержать минимум 3 символа.",
    },
    "record_content_empty": {
        Locale.EN: "Content cannot be empty.",
        Locale.RU: "Содержание не может быть пустым.",
    },
    "payload_invalid": {
        Locale.EN: "Invalid field value: {detail}",
        Locale.RU: "Некорректное значение поля: {detail}",
    },
    # --- Last-error messages --------------------------------------------------
    "validation_rejected": {
        Locale.EN: "VALIDATION ERROR: {reason}",
        Locale.RU: "ОШИБКА ВАЛИДАЦИИ: {reason}",
    },
    "simulated_disconnect_insert": {
        Locale.EN: (
            "CONNECTION ERROR (Simulation): the link to the server is lost. "
            "Check the 'Online' status."
        ),
        Locale.RU: (
            "ОШИБКА СОЕДИНЕНИЯ (Симуляция): Связь с сервером потеряна. "
            "Проверьте статус 'Онлайн'."
        ),
    },
    "simulated_disconnect": {
        Locale.EN: "CONNECTION ERROR (Simulation): the link to the server is lost.",
        Locale.RU: "ОШИБКА СОЕДИНЕНИЯ (Симуляция): Связь с сервером потеряна.",
    },
    "access_denied_insert": {
        Locale.EN: (
            "ACCESS ERROR (RLS): the store blocks adding data. Open the SQL Lab, "
            "generate the script (it disables row-level security) and run it "
            "against the database."
        ),
        Locale.RU: (
            "ОШИБКА ДОСТУПА (RLS): База данных блокирует добавление данных. "
            "Перейдите в 'SQL Лаборатория', сгенерируйте код (в нем есть команда "
            "отключения защиты) и выполните его в базе данных."
        ),
    },
    "access_denied_update": {
        Locale.EN: (
            "ACCESS ERROR (RLS): the store blocks changing data. Update the "
            "database structure through the SQL Lab."
        ),
        Locale.RU: (
            "ОШИБКА ДОСТУПА (RLS): База данных блокирует изменение данных. "
            "Обновите структуру БД через 'SQL Лаборатория'."
        ),
    },
    "access_denied_delete": {
        Locale.EN: (
            "ACCESS ERROR (RLS): the store blocks deletion. Update the database "
            "structure through the SQL Lab to disable RLS."
        ),
        Locale.RU: (
            "ОШИБКА ДОСТУПА (RLS): База данных блокирует удаление. Обновите "
            "структуру БД через 'SQL Лаборатория', чтобы отключить RLS."
        ),
    },
    "referential_conflict": {
        Locale.EN: (
            "Cannot delete the entry: other data still references it (for "
            "example, the user owns records). Delete the dependent entries or "
            "update the schema (ON DELETE CASCADE)."
        ),
        Locale.RU: (
            "Невозможно удалить запись: на неё ссылаются другие данные (например, "
            "у пользователя есть записи). Удалите зависимые записи вручную или "
            "обновите структуру БД (ON DELETE CASCADE)."
        ),
    },
    "silent_no_op": {
        Locale.EN: (
            "The entry was not deleted. A protection policy (RLS) may be "
            "enabled, the entry may already be gone, or a silent error occurred."
        ),
        Locale.RU: (
            "Запись не была удалена. Возможно, включена политика защиты (RLS), "
            "запись уже удалена, или произошла тихая ошибка."
        ),
    },
    "schema_missing": {
        Locale.EN: (
            "DATABASE IS EMPTY (Code 42P01). Tables not found. Open the SQL Lab, "
            "generate the script and run it against the database."
        ),
        Locale.RU: (
            "БАЗА ДАННЫХ ПУСТА (Код 42P01). Таблицы не найдены. Пожалуйста, "
            "перейдите в 'SQL Лаборатория', сгенерируйте код и выполните его "
            "в базе данных."
        ),
    },
    "refresh_failed": {
        Locale.EN: "Database connection error: {detail}",
        Locale.RU: "Ошибка подключения к базе данных: {detail}",
    },
    "write_failed": {
        Locale.EN: "DB Error: {detail}",
        Locale.RU: "Ошибка БД: {detail}",
    },
    "delete_failed": {
        Locale.EN: "DB delete error: {detail}",
        Locale.RU: "Ошибка удаления в БД: {detail}",
    },
    # --- Schema lab -----------------------------------------------------------
    "sql_placeholder": {
        Locale.EN: "-- No response from the model",
        Locale.RU: "-- Нет ответа от модели",
    },
    "sql_failed": {
        Locale.EN: "-- Text generation call failed: {detail}",
        Locale.RU: "-- Ошибка вызова сервиса генерации: {detail}",
    },
    "docs_placeholder": {
        Locale.EN: "# Documentation\n\nNo response from the model.",
        Locale.RU: "# Документация\n\nНет ответа от модели.",
    },
    "docs_failed": {
        Locale.EN: "# Error\n\nFailed to generate documentation: {detail}",
        Locale.RU: "# Ошибка\n\nНе удалось сгенерировать документацию: {detail}",
    },
    "output_language": {
        Locale.EN: "English",
        Locale.RU: "Russian",
    },
}


def get_string(key: str, locale: Locale, **params: object) -> str:
    """Look up a message and format its placeholders.

    Raises KeyError for unknown keys: a missing message is a programming error.
    """
    text = _STRINGS[key][locale]
    return text.format(**params) if params else text
