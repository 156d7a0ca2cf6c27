# gauges_connector/core/exceptions.py
class APIError(Exception):
    """Erreur de base du connecteur Gauges"""
    pass


class InvalidMethodError(APIError, ValueError):
    """Verbe HTTP non supporté (autorisés: GET, POST, PUT, DELETE)."""
    pass


class ConfigurationError(APIError, RuntimeError):
    """Configuration absente ou invalide (variables d'environnement)."""
    pass
