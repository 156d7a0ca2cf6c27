from numbers import Real

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Dict, Optional


# --- Paramètres des opérations de l'API Gauges ---
# Un champ optionnel à None est omis de la query string (exclude_none),
# une valeur "fausse" mais présente (page=0, "") est conservée.

class GaugesParams(BaseModel):
    """Base commune: coercition vers le type scalaire déclaré."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class UpdateProfileParams(GaugesParams):
    first_name: Optional[str] = Field(None, description="Prénom")
    last_name: Optional[str]  = Field(None, description="Nom")


class CreateClientParams(GaugesParams):
    description: Optional[str] = Field(None, description="Courte description de la clé d'API")


class ListGaugesParams(GaugesParams):
    page: Optional[int] = Field(None, description="Numéro de page de la liste des gauges")

    @field_validator("page", mode="before")
    @classmethod
    def truncate_page(cls, v: Any) -> Any:
        # 3.7 -> 3 ; les chaînes non numériques restent refusées
        if isinstance(v, Real) and not isinstance(v, bool):
            return int(v)
        return v


class GaugeParams(GaugesParams):
    """Création / mise à jour d'une gauge (site suivi)."""
    title: str                      = Field(..., description="Titre de la gauge")
    tz: str                         = Field(..., description="Fuseau horaire (ex: UTC, Europe/Paris)")
    allowed_hosts: Optional[str]    = Field(None, description="Hôtes autorisés, séparés par des virgules")
