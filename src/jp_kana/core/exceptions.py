"""Custom exceptions for kana conversion."""


class KanaError(Exception):
    """Base exception for jp-kana errors."""

    pass


class TableConstructionError(KanaError):
    """Raised when a conversion table cannot be built consistently."""

    pass
