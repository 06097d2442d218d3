"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni variables de entorno: solo registros.
"""

from core.domain.models import (
    MISSING_URL,
    ExistingRegistration,
    RegistrationOutcome,
    RegistrationRequest,
)

__all__ = [
    "MISSING_URL",
    "ExistingRegistration",
    "RegistrationOutcome",
    "RegistrationRequest",
]
